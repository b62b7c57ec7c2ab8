import json
import logging
from pathlib import Path
from typing import Dict

from django.conf import settings
from django.utils import timezone

from core.exceptions import ValidationException
from .models import TranslationSet

logger = logging.getLogger(__name__)


def deep_merge(base: Dict, override: Dict) -> Dict:
    """Recursive merge, values of `override` win. Neither input is mutated."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_locale_file(lang: str) -> Dict:
    """Locale JSON shipped with the frontend; missing or invalid files count as empty."""
    path = Path(settings.TRANSLATIONS_LOCALE_DIR) / f"{lang}.json"
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        logger.warning(f"Locale file not found: {path}")
        return {}
    except json.JSONDecodeError as e:
        logger.error(f"Invalid locale file {path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


class TranslationService:

    @staticmethod
    def get() -> Dict:
        return TranslationSet.load().as_dict()

    @staticmethod
    def update(data: Dict) -> Dict:
        provided = [lang for lang in settings.TRANSLATION_LANGUAGES if lang in data]
        if not provided:
            raise ValidationException(
                f"Provide at least one of {', '.join(settings.TRANSLATION_LANGUAGES)}."
            )

        obj = TranslationSet.load()
        for lang in provided:
            value = data[lang]
            if not isinstance(value, dict):
                raise ValidationException(f"'{lang}' must be an object.")
            setattr(obj, lang, value)
        obj.save()
        return obj.as_dict()

    @staticmethod
    def seed() -> Dict:
        """Add keys from the locale files. Values already in the database are kept."""
        obj = TranslationSet.load()
        counts = {}
        for lang in settings.TRANSLATION_LANGUAGES:
            merged = deep_merge(load_locale_file(lang), getattr(obj, lang) or {})
            setattr(obj, lang, merged)
            counts[lang] = len(merged)

        obj.seeded_at = timezone.now()
        obj.save()
        logger.info(f"Translations seeded from {settings.TRANSLATIONS_LOCALE_DIR}: {counts}")
        return counts
