# ============================================
# accounts/serializers/auth.py
# ============================================
from rest_framework import serializers

from accounts.serializers.user import UserOutputSerializer


# ===== Inputs (presence is checked by the service so messages stay uniform) =====
class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50, required=False, allow_blank=True, default="")
    email = serializers.CharField(max_length=254, required=False, allow_blank=True, default="")
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)


class VerifyEmailSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")
    otp = serializers.CharField(required=False, allow_blank=True, default="")


class EmailOnlySerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True, default="")


class ResetPasswordSerializer(serializers.Serializer):
    password = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)


# ===== Outputs =====
class AuthOutputSerializer(UserOutputSerializer):
    token = serializers.CharField(read_only=True)

    class Meta(UserOutputSerializer.Meta):
        fields = UserOutputSerializer.Meta.fields + ["token"]
