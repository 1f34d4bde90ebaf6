# ============================================
# accounts/views/auth.py
# ============================================
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.serializers.auth import (
    AuthOutputSerializer,
    EmailOnlySerializer,
    LoginSerializer,
    RegisterSerializer,
    ResetPasswordSerializer,
    VerifyEmailSerializer,
)
from accounts.services.auth_service import AuthResult, AuthService
from common.schema import MessageSerializer, extend_schema, std_errors


def _auth_payload(result: AuthResult, message: str = "") -> dict:
    user = result.user
    user.token = result.token
    data = dict(AuthOutputSerializer(user).data)
    if message:
        data["message"] = message
    return data


class PublicAuthAPIView(APIView):
    permission_classes = [AllowAny]

    def get_service(self) -> AuthService:
        return AuthService.from_settings()


class RegisterAPIView(PublicAuthAPIView):
    """
    POST: Create an unverified account, send a verification OTP, return a token.

    Request body:
    - name: string (required)
    - email: string (required, unique, case-insensitive)
    - password: string (required, min 6 chars)
    """

    @extend_schema(
        tags=["Auth"],
        summary="Register",
        request=RegisterSerializer,
        responses={201: AuthOutputSerializer, **std_errors(400)},
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().register(**serializer.validated_data)

        return Response(
            _auth_payload(
                result,
                "Registration successful. Please check your email for verification OTP.",
            ),
            status=status.HTTP_201_CREATED,
        )


class LoginAPIView(PublicAuthAPIView):

    @extend_schema(
        tags=["Auth"],
        summary="Log in with email and password",
        request=LoginSerializer,
        responses={200: AuthOutputSerializer, **std_errors(400, 401)},
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().login(**serializer.validated_data)
        return Response(_auth_payload(result))


class VerifyEmailAPIView(PublicAuthAPIView):

    @extend_schema(
        tags=["Auth"],
        summary="Verify email with the OTP",
        request=VerifyEmailSerializer,
        responses={200: MessageSerializer, **std_errors(400)},
    )
    def post(self, request):
        serializer = VerifyEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.get_service().verify_email(
            email=serializer.validated_data["email"],
            code=serializer.validated_data["otp"],
        )
        return Response({"message": "Email verified successfully", "is_email_verified": True})


class ResendOTPAPIView(PublicAuthAPIView):

    @extend_schema(
        tags=["Auth"],
        summary="Invalidate open OTPs and send a fresh one",
        request=EmailOnlySerializer,
        responses={200: MessageSerializer, **std_errors(400, 404, 500)},
    )
    def post(self, request):
        serializer = EmailOnlySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.get_service().resend_otp(**serializer.validated_data)
        return Response({"message": "Verification OTP sent to your email"})


class ForgotPasswordAPIView(PublicAuthAPIView):

    @extend_schema(
        tags=["Auth"],
        summary="Email a password reset link",
        request=EmailOnlySerializer,
        responses={200: MessageSerializer, **std_errors(400, 404, 500)},
    )
    def post(self, request):
        serializer = EmailOnlySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.get_service().forgot_password(**serializer.validated_data)
        return Response({"message": "Password reset link sent to your email"})


class ResetPasswordAPIView(PublicAuthAPIView):
    """
    POST: Set a new password using the raw token from the emailed link.

    Path params:
    - token: string
    """

    @extend_schema(
        tags=["Auth"],
        summary="Reset password",
        request=ResetPasswordSerializer,
        responses={200: AuthOutputSerializer, **std_errors(400)},
    )
    def post(self, request, token):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().reset_password(
            token=token,
            password=serializer.validated_data["password"],
        )
        return Response(_auth_payload(result, "Password reset successful"))
