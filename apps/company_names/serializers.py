from rest_framework import serializers

from .models import CompanyName


class CompanyNameSerializer(serializers.ModelSerializer):
    contactName = serializers.CharField(source="contact_name")
    mobileNumber = serializers.CharField(source="mobile_number")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = CompanyName
        fields = ["id", "name", "code", "contactName", "mobileNumber", "notes", "createdAt", "updatedAt"]
        read_only_fields = fields


class CompanyNamePublicSerializer(CompanyNameSerializer):
    """Dropdown entries of the registration forms."""

    class Meta(CompanyNameSerializer.Meta):
        fields = ["id", "name", "code", "contactName", "mobileNumber"]
        read_only_fields = fields


class UnregisteredCompanyNameSerializer(CompanyNameSerializer):
    isRegistered = serializers.SerializerMethodField()
    hasPreRegistration = serializers.SerializerMethodField()

    class Meta(CompanyNameSerializer.Meta):
        fields = CompanyNameSerializer.Meta.fields + ["isRegistered", "hasPreRegistration"]
        read_only_fields = fields

    def get_isRegistered(self, obj):
        return False

    def get_hasPreRegistration(self, obj):
        return False


class CompanyNameImportUploadSerializer(serializers.Serializer):
    file = serializers.FileField()

    def validate_file(self, value):
        if not value.name.lower().endswith((".xlsx", ".xlsm")):
            raise serializers.ValidationError("Only .xlsx files are accepted.")
        return value
