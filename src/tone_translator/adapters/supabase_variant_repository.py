"""Supabase-backed translation variant repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from tone_translator.domain.patches import VariantPatch
from tone_translator.domain.variants import TranslationVariant
from tone_translator.services.variants import VariantRepository

_TABLE = "translation_variants"
_COLUMNS = (
    "id, session_id, tone, politeness_level, style_hint, translated_text, "
    "is_favorite, created_at"
)


@dataclass
class SupabaseVariantRepository(VariantRepository):
    """Supabase implementation for translation variants."""

    client: Client

    def insert_variant(self, variant: TranslationVariant) -> TranslationVariant:
        """Insert a variant row and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "id": str(variant.id),
                    "session_id": str(variant.session_id),
                    "tone": variant.tone,
                    "politeness_level": variant.politeness_level,
                    "style_hint": variant.style_hint,
                    "translated_text": variant.translated_text,
                    "is_favorite": variant.is_favorite,
                    "created_at": variant.created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create translation variant")
        return _parse_variant(response.data[0])

    def update_variant(
        self, variant_id: UUID, session_id: UUID, patch: VariantPatch
    ) -> TranslationVariant | None:
        """Update the variant matching both ids and return it, if any."""
        response = (
            self.client.table(_TABLE)
            .update(patch.to_row())
            .eq("id", str(variant_id))
            .eq("session_id", str(session_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_variant(response.data[0])

    def delete_variant(self, variant_id: UUID, session_id: UUID) -> bool:
        """Delete the variant matching both ids."""
        response = (
            self.client.table(_TABLE)
            .delete()
            .eq("id", str(variant_id))
            .eq("session_id", str(session_id))
            .execute()
        )
        return bool(response.data)

    def list_variants(
        self, session_id: UUID, favorites_only: bool
    ) -> list[TranslationVariant]:
        """Return variants for a session, oldest first."""
        query = (
            self.client.table(_TABLE)
            .select(_COLUMNS)
            .eq("session_id", str(session_id))
        )
        if favorites_only:
            query = query.eq("is_favorite", True)
        response = query.order("created_at").order("id").execute()
        return [_parse_variant(row) for row in response.data or []]


def _parse_variant(row: dict[str, object]) -> TranslationVariant:
    """Parse a variant row into a domain model."""
    return TranslationVariant(
        id=UUID(str(row["id"])),
        session_id=UUID(str(row["session_id"])),
        tone=row.get("tone"),
        politeness_level=row.get("politeness_level"),
        style_hint=row.get("style_hint"),
        translated_text=str(row.get("translated_text", "")),
        is_favorite=bool(row.get("is_favorite", False)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
