from rest_framework import serializers

from .models import Company


class CompanySerializer(serializers.ModelSerializer):
    """Full company document (camelCase, as consumed by the frontend)."""

    registrantName = serializers.CharField(source="registrant_name")
    phoneNumber = serializers.CharField(source="phone_number")
    groupId = serializers.UUIDField(source="group_id", allow_null=True)
    groupName = serializers.SerializerMethodField()
    rejectionReason = serializers.CharField(source="rejection_reason")
    paymentDate = serializers.DateField(source="payment_date", allow_null=True)
    preRegistrationId = serializers.UUIDField(source="pre_registration_id", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    approvedAt = serializers.DateTimeField(source="approved_at", allow_null=True)
    rejectedAt = serializers.DateTimeField(source="rejected_at", allow_null=True)

    class Meta:
        model = Company
        fields = [
            "id", "name", "code", "registrantName", "phoneNumber", "email", "address",
            "groupId", "groupName", "status", "rejectionReason",
            "paid", "spent", "paymentDate", "preRegistrationId",
            "createdAt", "updatedAt", "approvedAt", "rejectedAt",
        ]
        read_only_fields = fields

    def get_groupName(self, obj):
        return obj.group.name if obj.group_id else None


class PublicQueueSerializer(serializers.ModelSerializer):
    """Safe public fields of the payment queue."""

    userName = serializers.CharField(source="registrant_name")
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Company
        fields = ["name", "userName", "paid", "createdAt"]
        read_only_fields = fields


class BulkDeleteSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)
