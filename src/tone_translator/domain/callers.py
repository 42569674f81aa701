"""Authenticated caller context."""

from dataclasses import dataclass
from uuid import UUID

from tone_translator.domain.sessions import TranslationSession


@dataclass(frozen=True)
class Caller:
    """The authenticated user an operation runs on behalf of."""

    user_id: UUID

    def owns(self, session: TranslationSession) -> bool:
        """Return whether this caller owns the session."""
        return session.user_id == self.user_id
