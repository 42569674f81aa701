"""Domain models for translation sessions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TranslationSession:
    """An original text plus language metadata, owned by a user."""

    id: UUID
    user_id: UUID
    source_language: str | None
    target_language: str | None
    context: str | None
    original_text: str
    created_at: datetime
    updated_at: datetime
