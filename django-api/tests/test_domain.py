"""Unit tests for domain primitives, patches and errors.

Run with: pytest tests/test_domain.py -v
"""

from dataclasses import FrozenInstanceError

import pytest

from concerts.domain import UNSET, Artist, ArtistPatch, ConcertPatch, PriceRange
from concerts.domain.errors import (
    ConcertNotFoundError,
    ErrorCode,
    NotFoundError,
    UserNotFoundError,
)


class TestPriceRange:
    """Tests for PriceRange value object."""

    def test_from_prices_takes_min_and_max(self):
        """The range spans the cheapest and dearest ticket."""
        prices = PriceRange.from_prices([3500, 1000, 5000, 2000])
        assert (prices.min_price, prices.max_price) == (1000, 5000)

    def test_from_prices_empty_is_zero(self):
        """No ticket types gives a 0/0 range."""
        assert PriceRange.from_prices([]) == PriceRange(min_price=0, max_price=0)

    def test_from_prices_accepts_generator(self):
        """Prices may be a one-shot iterable."""
        prices = PriceRange.from_prices(p for p in (700, 700))
        assert prices == PriceRange(min_price=700, max_price=700)

    def test_str_format(self):
        """String form is min-max."""
        assert str(PriceRange(min_price=1000, max_price=5000)) == "1000-5000"


class TestPatch:
    """Tests for partial-update patches."""

    @pytest.fixture
    def artist(self) -> Artist:
        return Artist(id=7, name="Moira", genre="Pop", bio="Singer", image_url=None)

    def test_empty_patch_has_no_changes(self):
        """A patch with nothing given reports no changes and is falsy."""
        patch = ArtistPatch()
        assert patch.changes() == {}
        assert not patch

    def test_changes_lists_only_given_fields(self):
        """Only fields given a value are reported."""
        patch = ConcertPatch(status="cancelled", is_featured=True)
        assert patch.changes() == {"status": "cancelled", "is_featured": True}

    def test_apply_merges_given_fields(self, artist):
        """Given fields replace the record's values; the rest are kept."""
        updated = ArtistPatch(genre="OPM").apply(artist)
        assert updated == Artist(
            id=7, name="Moira", genre="OPM", bio="Singer", image_url=None
        )

    def test_apply_can_clear_optional_field(self, artist):
        """An explicit None is a change, not an omission."""
        updated = ArtistPatch(bio=None).apply(artist)
        assert updated.bio is None
        assert updated.name == "Moira"

    def test_apply_returns_new_instance(self, artist):
        """The record passed in is untouched."""
        ArtistPatch(name="Other").apply(artist)
        assert artist.name == "Moira"

    def test_patch_has_no_id_field(self):
        """The id is never patchable."""
        with pytest.raises(TypeError):
            ArtistPatch(id=3)

    def test_unset_is_falsy_singleton(self):
        """UNSET is a single falsy marker."""
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert type(UNSET)() is UNSET

    def test_patch_is_frozen(self):
        """Patches cannot be mutated once built."""
        patch = ArtistPatch(name="A")
        with pytest.raises(FrozenInstanceError):
            patch.name = "B"


class TestErrors:
    """Tests for domain errors."""

    def test_not_found_carries_code_and_lookup(self):
        """Errors carry the error code, a safe message and the lookup key."""
        error = ConcertNotFoundError(42)
        assert error.code is ErrorCode.CONCERT_NOT_FOUND
        assert error.message == "Concert not found"
        assert error.lookup == 42

    def test_str_includes_code(self):
        """String form is CODE: message."""
        assert str(UserNotFoundError("ghost")) == "USER_NOT_FOUND: User not found"

    def test_subclasses_share_not_found_base(self):
        """Every not-found error can be caught as NotFoundError."""
        with pytest.raises(NotFoundError):
            raise UserNotFoundError(1)
