"""Pydantic request models for the translation API."""

from pydantic import BaseModel, Field

from tone_translator.domain.patches import SessionPatch, VariantPatch


class CreateSessionRequest(BaseModel):
    """Payload for creating a translation session."""

    source_language: str | None = None
    target_language: str | None = None
    context: str | None = None
    original_text: str = Field(min_length=1)


class UpdateSessionRequest(BaseModel):
    """Partial update for a session; only fields sent are applied."""

    source_language: str | None = None
    target_language: str | None = None
    context: str | None = None
    original_text: str | None = None

    def to_patch(self) -> SessionPatch:
        return SessionPatch(
            {name: getattr(self, name) for name in self.model_fields_set}
        )


class CreateVariantRequest(BaseModel):
    """Payload for creating a translation variant."""

    tone: str | None = None
    politeness_level: str | None = None
    style_hint: str | None = None
    translated_text: str = Field(min_length=1)
    is_favorite: bool = False


class UpdateVariantRequest(BaseModel):
    """Partial update for a variant; only fields sent are applied."""

    tone: str | None = None
    politeness_level: str | None = None
    style_hint: str | None = None
    translated_text: str | None = None
    is_favorite: bool | None = None

    def to_patch(self) -> VariantPatch:
        return VariantPatch(
            {name: getattr(self, name) for name in self.model_fields_set}
        )
