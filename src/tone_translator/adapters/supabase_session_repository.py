"""Supabase-backed translation session repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from tone_translator.domain.patches import SessionPatch
from tone_translator.domain.sessions import TranslationSession
from tone_translator.services.sessions import SessionRepository

_TABLE = "translation_sessions"
_COLUMNS = (
    "id, user_id, source_language, target_language, context, original_text, "
    "created_at, updated_at"
)


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for translation sessions."""

    client: Client

    def insert_session(self, session: TranslationSession) -> TranslationSession:
        """Insert a session row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "id": str(session.id),
                    "user_id": str(session.user_id),
                    "source_language": session.source_language,
                    "target_language": session.target_language,
                    "context": session.context,
                    "original_text": session.original_text,
                    "created_at": session.created_at.isoformat(),
                    "updated_at": session.updated_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create translation session")
        return _parse_session(response.data[0])

    def get_session(self, session_id: UUID) -> TranslationSession | None:
        """Return a session by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("id", str(session_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def update_session(
        self,
        session_id: UUID,
        user_id: UUID,
        patch: SessionPatch,
        updated_at: datetime,
    ) -> TranslationSession | None:
        """Update the owned session row and return it, if it matched."""
        response = (
            self.client.table(_TABLE)
            .update({**patch.to_row(), "updated_at": updated_at.isoformat()})
            .eq("id", str(session_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def list_sessions(self, user_id: UUID) -> list[TranslationSession]:
        """Return all sessions for a user, oldest first."""
        response = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at")
            .order("id")
            .execute()
        )
        return [_parse_session(row) for row in response.data or []]


def _parse_session(row: dict[str, object]) -> TranslationSession:
    """Parse a session row into a domain model."""
    return TranslationSession(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        source_language=row.get("source_language"),
        target_language=row.get("target_language"),
        context=row.get("context"),
        original_text=str(row.get("original_text", "")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
