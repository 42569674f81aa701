"""Partial update values for sessions and variants.

A patch maps field names to new values. A field missing from the mapping is
left untouched, while a field present with ``None`` clears an optional column.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import ClassVar, TypeVar

from tone_translator.domain.errors import ValidationError

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class Patch:
    """Base patch with per-field validation."""

    mutable_fields: ClassVar[frozenset[str]] = frozenset()
    required_text_fields: ClassVar[frozenset[str]] = frozenset()
    flag_fields: ClassVar[frozenset[str]] = frozenset()

    changes: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = set(self.changes) - self.mutable_fields
        if unknown:
            raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}.")
        for name, value in self.changes.items():
            if name in self.flag_fields:
                if not isinstance(value, bool):
                    raise ValidationError(f"{name} must be a boolean.")
            elif name in self.required_text_fields:
                if not isinstance(value, str) or not value:
                    raise ValidationError(f"{name} must be a non-empty string.")
            elif value is not None and not isinstance(value, str):
                raise ValidationError(f"{name} must be a string or null.")
        object.__setattr__(self, "changes", MappingProxyType(dict(self.changes)))

    def is_empty(self) -> bool:
        """Return whether the patch carries no changes."""
        return not self.changes

    def apply(self, record: RecordT) -> RecordT:
        """Return a copy of the record with the patched fields replaced."""
        return replace(record, **self.changes)

    def to_row(self) -> dict[str, object]:
        """Return the changes as a plain column mapping."""
        return dict(self.changes)


@dataclass(frozen=True)
class SessionPatch(Patch):
    """Partial update for a translation session."""

    mutable_fields: ClassVar[frozenset[str]] = frozenset(
        {"source_language", "target_language", "context", "original_text"}
    )
    required_text_fields: ClassVar[frozenset[str]] = frozenset({"original_text"})


@dataclass(frozen=True)
class VariantPatch(Patch):
    """Partial update for a translation variant."""

    mutable_fields: ClassVar[frozenset[str]] = frozenset(
        {"tone", "politeness_level", "style_hint", "translated_text", "is_favorite"}
    )
    required_text_fields: ClassVar[frozenset[str]] = frozenset({"translated_text"})
    flag_fields: ClassVar[frozenset[str]] = frozenset({"is_favorite"})
