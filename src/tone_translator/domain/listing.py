"""List results returned by the stores."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Protocol, TypeVar
from uuid import UUID

T = TypeVar("T")


@dataclass(frozen=True)
class ListResult(Generic[T]):
    """Items plus their total count."""

    items: list[T]
    total: int

    @classmethod
    def of(cls, items: list[T]) -> "ListResult[T]":
        return cls(items=items, total=len(items))


class _Created(Protocol):
    id: UUID
    created_at: datetime


CreatedT = TypeVar("CreatedT", bound=_Created)


def order_by_creation(items: Iterable[CreatedT]) -> list[CreatedT]:
    """Sort records by creation time, breaking ties on id."""
    return sorted(items, key=lambda item: (item.created_at, str(item.id)))
