from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class LoginSerializer(serializers.Serializer):
    """Username, email or display name + password."""
    username = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)


class UserSerializer(serializers.ModelSerializer):
    """Read representation. The password hash is never part of it."""
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    lastLogin = serializers.DateTimeField(source="last_login", read_only=True)

    class Meta:
        model = User
        fields = [
            "id", "username", "name", "email", "phone",
            "role", "status", "lastLogin", "createdAt", "updatedAt",
        ]
        read_only_fields = fields


class UserWriteSerializer(serializers.ModelSerializer):
    """
    Create / update a staff account (admin only).

    - name is required and unique (case-insensitive)
    - email is optional but unique when given
    - username defaults to the display name
    - password is required on creation; a blank password on update keeps
      the current one
    """
    username = serializers.CharField(max_length=150, required=False, allow_blank=True)
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True, trim_whitespace=False)

    class Meta:
        model = User
        fields = ["username", "name", "email", "phone", "role", "status", "password"]

    def _others(self):
        qs = User.objects.all()
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        return qs

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        if self._others().filter(name__iexact=value).exists():
            raise serializers.ValidationError("User with this name already exists.")
        return value

    def validate_email(self, value):
        value = (value or "").strip()
        if value and self._others().filter(email__iexact=value).exists():
            raise serializers.ValidationError("User with this email already exists.")
        return value

    def validate_username(self, value):
        value = (value or "").strip()
        if value and self._others().filter(username__iexact=value).exists():
            raise serializers.ValidationError("User with this username already exists.")
        return value

    def validate(self, attrs):
        if self.instance is None and not attrs.get("password", "").strip():
            raise serializers.ValidationError({"password": "Password is required."})

        if self.instance is None and not attrs.get("username"):
            username = attrs["name"]
            if self._others().filter(username__iexact=username).exists():
                raise serializers.ValidationError({"username": "User with this username already exists."})
            attrs["username"] = username
        return attrs

    def create(self, validated_data):
        password = validated_data.pop("password")
        user = User(**validated_data)
        user.set_password(password)
        user.save()
        return user

    def update(self, instance, validated_data):
        password = validated_data.pop("password", "")
        if "username" in validated_data and not validated_data["username"]:
            validated_data.pop("username")

        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        if password.strip():
            instance.set_password(password)
        instance.save()
        return instance
