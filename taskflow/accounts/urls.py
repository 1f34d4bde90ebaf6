# ============================================
# accounts/urls.py
# ============================================
from django.urls import path

from accounts.views.auth import (
    ForgotPasswordAPIView,
    LoginAPIView,
    RegisterAPIView,
    ResendOTPAPIView,
    ResetPasswordAPIView,
    VerifyEmailAPIView,
)
from accounts.views.users import (
    MeAPIView,
    ProfileAPIView,
    RoleAPIView,
    TeamAPIView,
    UserDetailAPIView,
    UserListAPIView,
)

app_name = "accounts"

urlpatterns = [
    # Public
    path("register/", RegisterAPIView.as_view(), name="register"),
    path("login/", LoginAPIView.as_view(), name="login"),
    path("verify-email/", VerifyEmailAPIView.as_view(), name="verify-email"),
    path("resend-otp/", ResendOTPAPIView.as_view(), name="resend-otp"),
    path("forgot-password/", ForgotPasswordAPIView.as_view(), name="forgot-password"),
    path("reset-password/<str:token>/", ResetPasswordAPIView.as_view(), name="reset-password"),

    # Bearer
    path("me/", MeAPIView.as_view(), name="me"),
    path("profile/", ProfileAPIView.as_view(), name="profile"),
    path("users/", UserListAPIView.as_view(), name="user-list"),
    path("users/<int:user_id>/", UserDetailAPIView.as_view(), name="user-detail"),
    path("role/", RoleAPIView.as_view(), name="role"),
    path("team/", TeamAPIView.as_view(), name="team"),
]
