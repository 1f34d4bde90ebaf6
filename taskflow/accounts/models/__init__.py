# ============================================
# accounts/models/__init__.py
# ============================================
from .user import User
from .otp import OTP

__all__ = [
    "User",
    "OTP",
]
