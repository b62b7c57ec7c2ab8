from django.contrib import admin

from .models import TranslationSet


@admin.register(TranslationSet)
class TranslationSetAdmin(admin.ModelAdmin):
    list_display = ["key", "seeded_at", "updated_at"]
    readonly_fields = ["key", "seeded_at", "updated_at"]
