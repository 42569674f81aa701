"""Store for translation variants, scoped through the parent session."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID, uuid4

from tone_translator.domain.callers import Caller
from tone_translator.domain.errors import NotFoundError, ValidationError
from tone_translator.domain.listing import ListResult, order_by_creation
from tone_translator.domain.patches import VariantPatch
from tone_translator.domain.variants import TranslationVariant
from tone_translator.services.sessions import (
    EMPTY_UPDATE_MESSAGE,
    SessionService,
    utc_now,
)

_logger = logging.getLogger(__name__)

VARIANT_NOT_FOUND_MESSAGE = "Translation variant not found."


class VariantRepository(Protocol):
    """Persistence interface for translation variants."""

    def insert_variant(self, variant: TranslationVariant) -> TranslationVariant:
        """Persist a new variant and return the stored row."""

    def update_variant(
        self, variant_id: UUID, session_id: UUID, patch: VariantPatch
    ) -> TranslationVariant | None:
        """Apply a patch to the variant matching both ids, if any."""

    def delete_variant(self, variant_id: UUID, session_id: UUID) -> bool:
        """Delete the variant matching both ids and report whether it existed."""

    def list_variants(
        self, session_id: UUID, favorites_only: bool
    ) -> list[TranslationVariant]:
        """Return variants for a session, optionally favorites only."""


@dataclass
class VariantService:
    """Application service for variant operations.

    Every operation resolves the parent session through
    ``SessionService.get_owned_session`` before touching the variant store,
    so a missing or foreign session fails before any write.
    """

    session_service: SessionService
    repository: VariantRepository
    clock: Callable[[], datetime] = utc_now

    def create_variant(  # noqa: PLR0913
        self,
        caller: Caller,
        session_id: UUID,
        translated_text: str,
        tone: str | None = None,
        politeness_level: str | None = None,
        style_hint: str | None = None,
        is_favorite: bool = False,
    ) -> TranslationVariant:
        """Create a variant under an owned session."""
        if not translated_text:
            raise ValidationError("translated_text must be a non-empty string.")
        self.session_service.get_owned_session(caller, session_id)
        variant = self.repository.insert_variant(
            TranslationVariant(
                id=uuid4(),
                session_id=session_id,
                tone=tone,
                politeness_level=politeness_level,
                style_hint=style_hint,
                translated_text=translated_text,
                is_favorite=is_favorite,
                created_at=self.clock(),
            )
        )
        _logger.info(
            "Created translation variant: variant_id=%s session_id=%s",
            variant.id,
            session_id,
        )
        return variant

    def update_variant(
        self,
        caller: Caller,
        session_id: UUID,
        variant_id: UUID,
        patch: VariantPatch,
    ) -> TranslationVariant:
        """Apply a partial update to a variant of an owned session."""
        if patch.is_empty():
            raise ValidationError(EMPTY_UPDATE_MESSAGE)
        self.session_service.get_owned_session(caller, session_id)
        updated = self.repository.update_variant(variant_id, session_id, patch)
        if updated is None:
            raise NotFoundError(VARIANT_NOT_FOUND_MESSAGE)
        _logger.info(
            "Updated translation variant: variant_id=%s fields=%s",
            variant_id,
            sorted(patch.changes),
        )
        return updated

    def delete_variant(
        self, caller: Caller, session_id: UUID, variant_id: UUID
    ) -> None:
        """Delete a variant of an owned session."""
        self.session_service.get_owned_session(caller, session_id)
        if not self.repository.delete_variant(variant_id, session_id):
            raise NotFoundError(VARIANT_NOT_FOUND_MESSAGE)
        _logger.info(
            "Deleted translation variant: variant_id=%s session_id=%s",
            variant_id,
            session_id,
        )

    def list_variants(
        self, caller: Caller, session_id: UUID, favorites_only: bool = False
    ) -> ListResult[TranslationVariant]:
        """Return the variants of an owned session."""
        self.session_service.get_owned_session(caller, session_id)
        variants = self.repository.list_variants(session_id, favorites_only)
        return ListResult.of(order_by_creation(variants))
