from rest_framework import serializers

from .models import PreRegistration


class PreRegistrationSerializer(serializers.ModelSerializer):
    mobileNumber = serializers.CharField(source="mobile_number")
    companyName = serializers.CharField(source="company_name")
    groupId = serializers.UUIDField(source="group_id", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = PreRegistration
        fields = [
            "id", "name", "mobileNumber", "companyName", "code",
            "groupId", "status", "createdAt", "updatedAt",
        ]
        read_only_fields = fields


class PreRegisteredCompanySerializer(serializers.ModelSerializer):
    """Company selector of the full registration page."""

    name = serializers.CharField(source="company_name")
    mobileNumber = serializers.CharField(source="mobile_number")
    contactName = serializers.CharField(source="name")

    class Meta:
        model = PreRegistration
        fields = ["id", "name", "mobileNumber", "contactName"]
        read_only_fields = fields
