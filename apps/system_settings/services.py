import logging

from django.conf import settings
from django.utils import timezone

from core.exceptions import RegistrationClosedException, ValidationException
from .models import WebsiteSettings
from .schedule import evaluate, parse_hhmm
from .signals import website_settings_changed

logger = logging.getLogger(__name__)

FALSE_STRINGS = {"false", "0", "no", "off", ""}


def coerce_bool(value) -> bool:
    """Truthy coercion for values coming from JSON bodies or form posts."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


class WebsiteSettingsService:
    """
    Read / update access to the WebsiteSettings singleton and the public
    representation consumed by the registration frontend.
    """

    # payload key → (model field, coercer)
    FIELD_MAP = {
        "isOpen": ("is_open", coerce_bool),
        "autoSchedule": ("auto_schedule", coerce_bool),
        "openTime": ("open_time", None),
        "closeTime": ("close_time", None),
        "codesActive": ("codes_active", coerce_bool),
        "message": ("message", None),
        "postRegistrationMessage": ("post_registration_message", None),
    }

    @staticmethod
    def get() -> WebsiteSettings:
        return WebsiteSettings.load()

    @classmethod
    def update(cls, data: dict, actor: str = None) -> WebsiteSettings:
        """
        Merge the provided fields over the stored document and save it.
        Absent fields keep their current value. Time strings must be empty
        or parse as HH:MM.
        """
        obj = cls.get()

        for key, (field, coercer) in cls.FIELD_MAP.items():
            if key not in data:
                continue
            value = data[key]
            if coercer is not None:
                value = coercer(value)
            else:
                value = "" if value is None else str(value).strip()
            setattr(obj, field, value)

        for field in ("open_time", "close_time"):
            value = getattr(obj, field)
            if value and parse_hhmm(value) is None:
                raise ValidationException(f"Invalid {field.replace('_', ' ')} '{value}'. Expected HH:MM.")

        obj.save()
        website_settings_changed.send(sender=WebsiteSettings, instance=obj, actor=actor)
        return obj

    @staticmethod
    def public_state(obj: WebsiteSettings = None, now=None) -> dict:
        obj = obj or WebsiteSettingsService.get()
        now = now or timezone.localtime()
        state = evaluate(obj, now)

        return {
            "isOpen": state.is_open,
            "manualIsOpen": obj.is_open,
            "message": obj.message,
            "openTime": obj.open_time,
            "closeTime": obj.close_time,
            "autoSchedule": obj.auto_schedule,
            "scheduleActive": state.schedule_active,
            "codesActive": obj.codes_active,
            "postRegistrationMessage": obj.post_registration_message,
            "countdown": state.countdown.as_dict() if state.countdown else None,
            "pollInterval": settings.REGISTRATION_POLL_INTERVAL,
            "serverTime": now.isoformat(),
        }

    @staticmethod
    def ensure_registration_open(now=None) -> WebsiteSettings:
        """
        Server-side re-validation of the registration window. Raises
        RegistrationClosedException carrying the admin's closed message.
        """
        obj = WebsiteSettingsService.get()
        now = now or timezone.localtime()
        if not evaluate(obj, now).is_open:
            logger.info(f"Registration rejected: window closed at {now.strftime('%H:%M:%S')}")
            raise RegistrationClosedException(detail=obj.message or None)
        return obj
