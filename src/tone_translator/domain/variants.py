"""Domain models for translation variants."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TranslationVariant:
    """A tone or style adjusted translation belonging to a session."""

    id: UUID
    session_id: UUID
    tone: str | None
    politeness_level: str | None
    style_hint: str | None
    translated_text: str
    is_favorite: bool
    created_at: datetime
