"""Partial updates for stored records.

A patch has the same fields as the record it updates, minus ``id``.
Every field defaults to ``UNSET``; only fields given a value are merged
into the record, so ``ArtistPatch(bio=None)`` clears the bio while
``ArtistPatch()`` changes nothing.
"""

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, TypeVar

R = TypeVar("R")


class _Unset:
    """Marker for a patch field that was not given."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Patch:
    """Base class for per-entity patches."""

    def changes(self) -> dict[str, Any]:
        """Return the fields that were given, by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def apply(self, record: R) -> R:
        """Return a copy of ``record`` with the given fields replaced."""
        return replace(record, **self.changes())

    def __bool__(self) -> bool:
        return bool(self.changes())


@dataclass(frozen=True)
class UserPatch(Patch):
    username: str = UNSET
    password: str = UNSET
    name: str = UNSET
    email: str = UNSET
    phone: str | None = UNSET
    address: str | None = UNSET
    is_admin: bool = UNSET


@dataclass(frozen=True)
class ArtistPatch(Patch):
    name: str = UNSET
    genre: str = UNSET
    bio: str | None = UNSET
    image_url: str | None = UNSET


@dataclass(frozen=True)
class VenuePatch(Patch):
    name: str = UNSET
    address: str = UNSET
    location: str = UNSET
    capacity: int = UNSET
    image_url: str | None = UNSET


@dataclass(frozen=True)
class ConcertPatch(Patch):
    title: str = UNSET
    date: datetime = UNSET
    description: str = UNSET
    venue_id: int = UNSET
    artist_id: int = UNSET
    status: str = UNSET
    is_featured: bool = UNSET
    image_url: str | None = UNSET


@dataclass(frozen=True)
class TicketTypePatch(Patch):
    concert_id: int = UNSET
    name: str = UNSET
    price: int = UNSET
    quantity: int = UNSET
    description: str = UNSET
