from rest_framework import serializers

from .models import WebsiteSettings


class WebsiteSettingsSerializer(serializers.ModelSerializer):
    """Raw stored document, as seen by administrators."""

    isOpen = serializers.BooleanField(source="is_open")
    autoSchedule = serializers.BooleanField(source="auto_schedule")
    openTime = serializers.CharField(source="open_time")
    closeTime = serializers.CharField(source="close_time")
    codesActive = serializers.BooleanField(source="codes_active")
    postRegistrationMessage = serializers.CharField(source="post_registration_message")
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = WebsiteSettings
        fields = [
            "isOpen", "autoSchedule", "openTime", "closeTime",
            "codesActive", "message", "postRegistrationMessage",
            "createdAt", "updatedAt",
        ]
        read_only_fields = fields
