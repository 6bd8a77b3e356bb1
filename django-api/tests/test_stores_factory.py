"""Tests for building a store from settings.

Run with: pytest tests/test_stores_factory.py -v
"""

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.core.management import call_command

from concerts.stores import DJANGO, MEMORY, MemoryConcertStore, build_store
from concerts.stores.django_store import DjangoConcertStore


class TestBuildStore:
    """Tests for build_store."""

    def test_defaults_to_seeded_memory_store(self, settings):
        """The memory backend is seeded unless told otherwise."""
        settings.CONCERTS = {"STORE": MEMORY, "SEED": True}
        store = build_store()
        assert isinstance(store, MemoryConcertStore)
        assert len(store.get_artists()) == 4

    def test_seed_setting_is_honoured(self, settings):
        """SEED=False builds an empty store."""
        settings.CONCERTS = {"STORE": MEMORY, "SEED": False}
        assert build_store().get_concerts() == []

    def test_each_call_builds_a_new_store(self, settings):
        """Stores are not shared between callers."""
        settings.CONCERTS = {"STORE": MEMORY, "SEED": False}
        assert build_store() is not build_store()

    def test_arguments_override_settings(self, settings):
        """Explicit arguments win over settings."""
        settings.CONCERTS = {"STORE": "nonsense", "SEED": True}
        store = build_store(backend=MEMORY, seed=False)
        assert store.get_categories() == []

    def test_unknown_backend_raises(self, settings):
        """An unknown backend name is a configuration error."""
        settings.CONCERTS = {"STORE": "redis"}
        with pytest.raises(ImproperlyConfigured):
            build_store()

    @pytest.mark.django_db
    def test_django_backend_is_seeded(self):
        """The ORM backend is seeded through the same fixture."""
        store = build_store(backend=DJANGO, seed=True)
        assert isinstance(store, DjangoConcertStore)
        assert len(store.get_categories()) == 6
        featured = store.get_featured_concerts()
        assert [listing.concert.title for listing in featured] == [
            "Pop Explosion",
            "Rock Legends",
        ]
        assert all(listing.max_price == 5000 for listing in featured)

    @pytest.mark.django_db
    def test_migrations_match_models(self):
        """The ORM backend's migrations cover every model field."""
        call_command("makemigrations", "concerts", "--check", "--dry-run", verbosity=0)
