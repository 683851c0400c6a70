"""API dependencies including authentication."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.rate_limit import InMemoryRateLimiter
from catalog.api.security import (
    AuthenticatedUser,
    SecurityEvent,
    TokenVerifier,
    UserRole,
    log_security_event,
)
from catalog.db import get_db
from catalog.errors import ForbiddenError, RateLimitError, UnauthorizedError

bearer_scheme = HTTPBearer(auto_error=False)


def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    verifier: Annotated[TokenVerifier, Depends(get_token_verifier)],
) -> AuthenticatedUser:
    """Dependency to get the current authenticated user from the bearer token."""
    if credentials is None or not credentials.credentials:
        log_security_event(
            SecurityEvent.UNAUTHORIZED_ACCESS,
            ip=_client_ip(request),
            path=request.url.path,
            method=request.method,
        )
        raise UnauthorizedError("No token provided")

    try:
        return verifier.verify(credentials.credentials)
    except UnauthorizedError as e:
        event = (
            SecurityEvent.TOKEN_EXPIRED
            if e.message == "Token expired"
            else SecurityEvent.INVALID_TOKEN
        )
        log_security_event(
            event,
            ip=_client_ip(request),
            path=request.url.path,
            method=request.method,
        )
        raise


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
DBSession = Annotated[AsyncSession, Depends(get_db)]


def require_roles(*roles: UserRole) -> Callable[..., AuthenticatedUser]:
    """Build a dependency that admits only users holding one of ``roles``."""
    allowed = {role.value for role in roles}

    def dependency(request: Request, user: CurrentUser) -> AuthenticatedUser:
        if user.role not in allowed:
            log_security_event(
                SecurityEvent.FORBIDDEN_ACCESS,
                user_id=user.id,
                role=user.role,
                path=request.url.path,
                method=request.method,
            )
            raise ForbiddenError(
                f"Access denied. Required roles: {', '.join(role.value for role in roles)}"
            )
        return user

    return dependency


ContentEditor = Annotated[AuthenticatedUser, Depends(require_roles(UserRole.ADMIN, UserRole.USER))]
AdminUser = Annotated[AuthenticatedUser, Depends(require_roles(UserRole.ADMIN))]


async def enforce_rate_limit(request: Request) -> None:
    """Router-level dependency counting requests per client IP."""
    limiter: InMemoryRateLimiter | None = request.app.state.rate_limiter
    if limiter is None:
        return

    ip = _client_ip(request)
    allowed, retry_after = limiter.allow(ip)
    if not allowed:
        log_security_event(
            SecurityEvent.RATE_LIMIT_EXCEEDED,
            ip=ip,
            path=request.url.path,
            method=request.method,
        )
        raise RateLimitError(retry_after)
