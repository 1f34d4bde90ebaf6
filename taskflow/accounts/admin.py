from django.contrib import admin

from accounts.models import OTP, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "role", "is_email_verified", "is_active", "created_at")
    list_filter = ("role", "is_email_verified", "is_active")
    search_fields = ("email", "name")
    exclude = ("password", "reset_token_hash")


@admin.register(OTP)
class OTPAdmin(admin.ModelAdmin):
    list_display = ("email", "purpose", "is_used", "expires_at", "created_at")
    list_filter = ("purpose", "is_used")
    search_fields = ("email",)
    exclude = ("code",)
