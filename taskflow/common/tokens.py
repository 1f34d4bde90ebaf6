# ============================================
# common/tokens.py
# ============================================
import time
from typing import Dict

import jwt

from common.config import TokenConfig
from common.exceptions import Unauthenticated


class TokenCodec:
    """Signs and verifies the bearer tokens handed out at login/register."""

    def __init__(self, config: TokenConfig):
        self.config = config

    def issue(self, user_id) -> str:
        now = int(time.time())
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + int(self.config.lifetime.total_seconds()),
        }
        return jwt.encode(payload, self.config.secret, algorithm=self.config.algorithm)

    def decode(self, token: str) -> Dict:
        if not token:
            raise Unauthenticated("Not authorized, no token")

        try:
            data = jwt.decode(
                token,
                self.config.secret,
                algorithms=[self.config.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise Unauthenticated("Not authorized, token expired")
        except jwt.InvalidTokenError:
            raise Unauthenticated("Not authorized, token failed")

        return data
