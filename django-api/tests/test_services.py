"""Unit tests for CatalogService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

import pytest

from concerts.domain import ArtistPatch, ConcertPatch, NewOrder, NewOrderItem, UserPatch
from concerts.domain.errors import (
    ArtistNotFoundError,
    ConcertNotFoundError,
    ErrorCode,
    OrderNotFoundError,
    TicketTypeNotFoundError,
    UserNotFoundError,
    VenueNotFoundError,
)
from concerts.services.catalog_service import CatalogService


@pytest.fixture
def service(seeded_store) -> CatalogService:
    return CatalogService(seeded_store)


class TestCatalogService:
    """Tests for CatalogService."""

    def test_get_concert_returns_record(self, service):
        """Existing concerts are returned as-is."""
        assert service.get_concert(1).title == "Pop Explosion"

    def test_get_concert_not_found_raises_error(self, service):
        """get_concert raises ConcertNotFoundError when the store returns None."""
        with pytest.raises(ConcertNotFoundError) as excinfo:
            service.get_concert(99)
        assert excinfo.value.code is ErrorCode.CONCERT_NOT_FOUND
        assert excinfo.value.lookup == 99

    def test_concert_details_tolerate_missing_venue(self, service, seeded_store):
        """A deleted venue is not an error for concert details."""
        seeded_store.delete_venue(1)
        details = service.get_concert_details(1)
        assert details.venue is None
        assert len(details.ticket_types) == 4

    def test_concert_details_not_found(self, service):
        """Details of an unknown concert raise ConcertNotFoundError."""
        with pytest.raises(ConcertNotFoundError):
            service.get_concert_details(99)

    def test_get_ticket_types_requires_concert(self, service):
        """Ticket types of an unknown concert raise ConcertNotFoundError."""
        assert len(service.get_ticket_types(2)) == 4
        with pytest.raises(ConcertNotFoundError):
            service.get_ticket_types(99)

    def test_update_and_delete_missing_raise(self, service):
        """Updates and deletes of unknown ids raise the entity's error."""
        with pytest.raises(ArtistNotFoundError):
            service.update_artist(99, ArtistPatch(name="x"))
        with pytest.raises(ArtistNotFoundError):
            service.delete_artist(99)
        with pytest.raises(VenueNotFoundError):
            service.delete_venue(99)
        with pytest.raises(ConcertNotFoundError):
            service.update_concert(99, ConcertPatch(title="x"))
        with pytest.raises(TicketTypeNotFoundError):
            service.delete_ticket_type(99)

    def test_delete_existing_succeeds(self, service, seeded_store):
        """Deleting an existing concert goes through to the store."""
        service.delete_concert(3)
        assert seeded_store.get_concert(3) is None
        with pytest.raises(ConcertNotFoundError):
            service.delete_concert(3)

    def test_update_artist(self, service):
        """Updates return the merged record."""
        artist = service.update_artist(2, ArtistPatch(genre="Alternative"))
        assert (artist.name, artist.genre) == ("Bamboo", "Alternative")

    def test_user_lookups(self, service):
        """Unknown users raise UserNotFoundError by id, username or update."""
        with pytest.raises(UserNotFoundError):
            service.get_user(1)
        with pytest.raises(UserNotFoundError) as excinfo:
            service.get_user_by_username("nobody")
        assert excinfo.value.lookup == "nobody"
        with pytest.raises(UserNotFoundError):
            service.update_user(1, UserPatch(name="x"))

    def test_order_items(self, service, seeded_store):
        """Items are listed for an existing order only."""
        order = seeded_store.create_order(NewOrder(user_id=1))
        item = seeded_store.create_order_item(
            NewOrderItem(order_id=order.id, ticket_type_id=1, quantity=2)
        )
        assert service.get_order(order.id) == order
        assert service.get_order_items(order.id) == [item]
        with pytest.raises(OrderNotFoundError):
            service.get_order_items(99)
