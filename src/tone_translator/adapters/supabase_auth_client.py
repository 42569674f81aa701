"""Supabase Auth adapter for resolving the calling user."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from supabase import AuthError, Client

from tone_translator.domain.callers import Caller

_logger = logging.getLogger(__name__)


class Authenticator(Protocol):
    """Interface for turning access tokens into callers."""

    def resolve_caller(self, access_token: str) -> Caller | None:
        """Return the caller for a token, or None when it is not valid."""


@dataclass
class SupabaseAuthenticator:
    """Authenticator that verifies tokens against Supabase Auth."""

    client: Client

    def resolve_caller(self, access_token: str) -> Caller | None:
        """Verify the token with Supabase and return its user as a caller."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.warning("Supabase rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return Caller(user_id=UUID(str(response.user.id)))
