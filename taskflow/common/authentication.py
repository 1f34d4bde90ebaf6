# ============================================
# common/authentication.py
# ============================================
import logging

from django.contrib.auth import get_user_model
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from common.config import TokenConfig
from common.exceptions import Unauthenticated
from common.tokens import TokenCodec

logger = logging.getLogger(__name__)


class JWTAuthentication(BaseAuthentication):
    """
    Resolves ``Authorization: Bearer <token>`` to an active user.

    Returns ``None`` when no bearer header is present so that public views and
    ``IsAuthenticated`` can decide; a present-but-bad token is always a 401.
    """

    keyword = "Bearer"

    def authenticate(self, request):
        auth = get_authorization_header(request).split()

        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise Unauthenticated("Invalid token header")

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise Unauthenticated("Invalid token header")

        claims = TokenCodec(TokenConfig.from_settings()).decode(token)
        return self._get_user(claims), claims

    def _get_user(self, claims):
        User = get_user_model()
        try:
            user = User.objects.get(pk=claims["sub"])
        except (User.DoesNotExist, ValueError, TypeError):
            logger.info("Bearer token for unknown user %s", claims.get("sub"))
            raise Unauthenticated("Not authorized, user not found")

        if not user.is_active:
            raise Unauthenticated("User account is disabled")

        return user

    def authenticate_header(self, request):
        return self.keyword
