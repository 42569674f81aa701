"""Caller resolution for API requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, Request

from tone_translator.adapters.supabase_auth_client import Authenticator  # noqa: TC001
from tone_translator.domain.callers import Caller  # noqa: TC001
from tone_translator.domain.errors import UnauthorizedError

if TYPE_CHECKING:
    from tone_translator.containers import AppContainer

_BEARER_PREFIX = "bearer "


def _get_authenticator(request: Request) -> Authenticator:
    container: AppContainer = request.app.state.container
    return container.authenticator


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None


def require_caller(
    authorization: str | None = Header(default=None),
    authenticator: Authenticator = Depends(_get_authenticator),
) -> Caller:
    """Resolve the authenticated caller or reject the request."""
    token = parse_bearer_token(authorization)
    if token is None:
        raise UnauthorizedError()
    caller = authenticator.resolve_caller(token)
    if caller is None:
        raise UnauthorizedError()
    return caller
