from rest_framework import serializers

from apps.system_settings.schedule import parse_hhmm
from .capacity import is_full, registered_count_for, remaining_slots
from .models import Group


class GroupSerializer(serializers.ModelSerializer):
    """Read serializer, expects querysets annotated by with_registered_count()."""

    timeFrom = serializers.CharField(source="time_from")
    timeTo = serializers.CharField(source="time_to")
    maxCompanies = serializers.IntegerField(source="max_companies")
    registeredCount = serializers.SerializerMethodField()
    remaining = serializers.SerializerMethodField()
    isFull = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = Group
        fields = [
            "id", "name", "date", "day", "timeFrom", "timeTo",
            "maxCompanies", "registeredCount", "remaining", "isFull",
            "createdAt", "updatedAt",
        ]
        read_only_fields = fields

    def get_registeredCount(self, obj):
        return registered_count_for(obj)

    def get_remaining(self, obj):
        return remaining_slots(obj.max_companies, registered_count_for(obj))

    def get_isFull(self, obj):
        return is_full(obj.max_companies, registered_count_for(obj))


class GroupPublicSerializer(GroupSerializer):
    """Fields shown on the registration form."""

    class Meta(GroupSerializer.Meta):
        fields = [
            "id", "name", "date", "day", "timeFrom", "timeTo",
            "maxCompanies", "registeredCount", "remaining", "isFull",
        ]
        read_only_fields = fields


class GroupWriteSerializer(serializers.ModelSerializer):
    """Create / update (admin only). PUT merges like PATCH."""

    timeFrom = serializers.CharField(source="time_from")
    timeTo = serializers.CharField(source="time_to")
    maxCompanies = serializers.IntegerField(source="max_companies", required=False, min_value=0)
    day = serializers.CharField(required=False, allow_blank=True)

    class Meta:
        model = Group
        fields = ["name", "date", "day", "timeFrom", "timeTo", "maxCompanies"]

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Group name is required.")
        qs = Group.objects.filter(name__iexact=value)
        if self.instance:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError(f"A group named '{value}' already exists.")
        return value

    def _validate_time(self, value):
        parsed = parse_hhmm(value)
        if parsed is None:
            raise serializers.ValidationError("Expected a time in HH:MM format.")
        return parsed.strftime("%H:%M")

    def validate_timeFrom(self, value):
        return self._validate_time(value)

    def validate_timeTo(self, value):
        return self._validate_time(value)

    def update(self, instance, validated_data):
        # date changed without an explicit day: re-derive the weekday
        if "date" in validated_data and "day" not in validated_data:
            validated_data["day"] = ""
        return super().update(instance, validated_data)
