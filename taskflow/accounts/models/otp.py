# ============================================
# accounts/models/otp.py
# ============================================
from django.conf import settings
from django.db import models


class OTP(models.Model):
    class Purpose(models.TextChoices):
        EMAIL_VERIFICATION = "email_verification", "Email verification"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="otps",
    )
    email = models.EmailField()
    code = models.CharField(max_length=6)
    purpose = models.CharField(
        max_length=32,
        choices=Purpose.choices,
        default=Purpose.EMAIL_VERIFICATION,
    )
    is_used = models.BooleanField(default=False)
    expires_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "otps"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["email", "purpose", "is_used"], name="otps_email_open_idx"),
            models.Index(fields=["expires_at"], name="otps_expires_idx"),
        ]

    def __str__(self):
        state = "used" if self.is_used else "open"
        return f"OTP[{self.purpose}] {self.email} ({state})"
