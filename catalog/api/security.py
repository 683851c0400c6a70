"""JWT verification and security event logging."""

import enum
import logging
from dataclasses import dataclass
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from catalog.errors import UnauthorizedError

security_logger = logging.getLogger("catalog.security")


class UserRole(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class SecurityEvent(str, enum.Enum):
    UNAUTHORIZED_ACCESS = "UNAUTHORIZED_ACCESS"
    FORBIDDEN_ACCESS = "FORBIDDEN_ACCESS"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"


def log_security_event(event: SecurityEvent, **details: Any) -> None:
    """Log a security event with its details as structured ``extra`` fields."""
    security_logger.warning(
        "Security event %s %s",
        event.value,
        " ".join(f"{key}={value}" for key, value in details.items()),
        extra={"security_event": event.value, **details},
    )


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    email: str
    role: str


class TokenVerifier:
    """Verifies bearer tokens issued by the identity service."""

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def decode_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT token."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise UnauthorizedError("Token expired")
        except JWTError:
            raise UnauthorizedError("Invalid token")

    def verify(self, token: str) -> AuthenticatedUser:
        payload = self.decode_token(token)

        user_id = payload.get("id")
        email = payload.get("email")
        role = payload.get("role")
        if not user_id or not email or not role:
            raise UnauthorizedError("Invalid token")

        return AuthenticatedUser(id=str(user_id), email=str(email), role=str(role))
