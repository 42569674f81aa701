"""Ownership-scoped store for translation sessions."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID, uuid4

from tone_translator.domain.callers import Caller
from tone_translator.domain.errors import NotFoundError, ValidationError
from tone_translator.domain.listing import ListResult, order_by_creation
from tone_translator.domain.patches import SessionPatch
from tone_translator.domain.sessions import TranslationSession

_logger = logging.getLogger(__name__)

EMPTY_UPDATE_MESSAGE = "At least one field must be provided to update."
SESSION_NOT_FOUND_MESSAGE = "Translation session not found."


class SessionRepository(Protocol):
    """Persistence interface for translation sessions."""

    def insert_session(self, session: TranslationSession) -> TranslationSession:
        """Persist a new session and return the stored row."""

    def get_session(self, session_id: UUID) -> TranslationSession | None:
        """Return a session by id, if present."""

    def update_session(
        self,
        session_id: UUID,
        user_id: UUID,
        patch: SessionPatch,
        updated_at: datetime,
    ) -> TranslationSession | None:
        """Apply a patch to an owned session and return it, if it matched."""

    def list_sessions(self, user_id: UUID) -> list[TranslationSession]:
        """Return all sessions owned by a user."""


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


def next_updated_at(previous: datetime, now: datetime) -> datetime:
    """Return a timestamp strictly after ``previous``."""
    if now > previous:
        return now
    return previous + timedelta(microseconds=1)


@dataclass
class SessionService:
    """Application service for session operations."""

    repository: SessionRepository
    clock: Callable[[], datetime] = utc_now

    def create_session(
        self,
        caller: Caller,
        original_text: str,
        source_language: str | None = None,
        target_language: str | None = None,
        context: str | None = None,
    ) -> TranslationSession:
        """Create a session owned by the caller."""
        if not original_text:
            raise ValidationError("original_text must be a non-empty string.")
        now = self.clock()
        session = self.repository.insert_session(
            TranslationSession(
                id=uuid4(),
                user_id=caller.user_id,
                source_language=source_language,
                target_language=target_language,
                context=context,
                original_text=original_text,
                created_at=now,
                updated_at=now,
            )
        )
        _logger.info(
            "Created translation session: session_id=%s user_id=%s",
            session.id,
            caller.user_id,
        )
        return session

    def update_session(
        self, caller: Caller, session_id: UUID, patch: SessionPatch
    ) -> TranslationSession:
        """Apply a partial update to an owned session."""
        if patch.is_empty():
            raise ValidationError(EMPTY_UPDATE_MESSAGE)
        current = self.get_owned_session(caller, session_id)
        updated = self.repository.update_session(
            session_id,
            caller.user_id,
            patch,
            updated_at=next_updated_at(current.updated_at, self.clock()),
        )
        if updated is None:
            raise NotFoundError(SESSION_NOT_FOUND_MESSAGE)
        _logger.info(
            "Updated translation session: session_id=%s fields=%s",
            session_id,
            sorted(patch.changes),
        )
        return updated

    def list_sessions(self, caller: Caller) -> ListResult[TranslationSession]:
        """Return every session the caller owns."""
        sessions = self.repository.list_sessions(caller.user_id)
        return ListResult.of(
            order_by_creation(session for session in sessions if caller.owns(session))
        )

    def get_owned_session(
        self, caller: Caller, session_id: UUID
    ) -> TranslationSession:
        """Return the session if the caller owns it."""
        session = self.repository.get_session(session_id)
        if session is None or not caller.owns(session):
            raise NotFoundError(SESSION_NOT_FOUND_MESSAGE)
        return session
