from django.db import models


def empty_dict():
    return {}


class TranslationSet(models.Model):
    """
    Site-wide translation overrides, one JSON tree per language.

    Singleton keyed "site". The frontend ships its own locale files and
    applies these values on top of them at runtime.
    """

    SITE_KEY = "site"

    key = models.CharField(max_length=20, primary_key=True, default=SITE_KEY, editable=False)
    en = models.JSONField(default=empty_dict, blank=True, verbose_name="English")
    ku = models.JSONField(default=empty_dict, blank=True, verbose_name="Kurdish")
    ar = models.JSONField(default=empty_dict, blank=True, verbose_name="Arabic")

    seeded_at = models.DateTimeField(null=True, blank=True, verbose_name="Seeded at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last modified")

    class Meta:
        db_table = "translations"
        verbose_name = "Translation set"
        verbose_name_plural = "Translation sets"

    def __str__(self):
        return f"Translations ({self.key})"

    @classmethod
    def load(cls) -> "TranslationSet":
        obj, _ = cls.objects.get_or_create(key=cls.SITE_KEY)
        return obj

    def as_dict(self) -> dict:
        return {"en": self.en or {}, "ku": self.ku or {}, "ar": self.ar or {}}
