"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from concerts.domain import NewArtist, NewConcert, NewTicketType, NewVenue
from concerts.stores.django_store import DjangoConcertStore
from concerts.stores.memory_store import MemoryConcertStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 31, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def memory_store(fixed_now) -> MemoryConcertStore:
    """Empty in-memory store with a frozen clock."""
    return MemoryConcertStore(seed=False, clock=lambda: fixed_now)


@pytest.fixture
def seeded_store(fixed_now) -> MemoryConcertStore:
    return MemoryConcertStore(clock=lambda: fixed_now)


@pytest.fixture(params=["memory", "django"])
def store(request, fixed_now):
    """Empty store of each backend; both must honour the same contract."""
    if request.param == "django":
        request.getfixturevalue("db")
        return DjangoConcertStore(clock=lambda: fixed_now)
    return MemoryConcertStore(seed=False, clock=lambda: fixed_now)


@pytest.fixture
def make_concert():
    """Create an artist, a venue and a February concert between them."""

    def _make(store, title="Night Show", day=10, **overrides):
        artist = store.create_artist(NewArtist(name="Moira", genre="Pop"))
        venue = store.create_venue(
            NewVenue(name="Hall", address="1 Main St", location="Makati", capacity=500)
        )
        fields = dict(
            title=title,
            date=datetime(2026, 2, day, 20, tzinfo=timezone.utc),
            description="An evening show",
            venue_id=venue.id,
            artist_id=artist.id,
        )
        fields.update(overrides)
        return store.create_concert(NewConcert(**fields))

    return _make


@pytest.fixture
def add_tiers():
    """Create one ticket type per price for a concert."""

    def _add(store, concert_id, prices=(5000, 3500, 2000, 1000)):
        return [
            store.create_ticket_type(
                NewTicketType(
                    concert_id=concert_id,
                    name=f"Tier {price}",
                    price=price,
                    quantity=100,
                    description="Seats",
                )
            )
            for price in prices
        ]

    return _add
