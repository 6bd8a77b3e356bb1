"""Catalog service - maps missing records to domain errors.

Services:
- Depend only on interfaces (stores)
- Translate the store's None/False results into domain errors
- Return domain models or raise domain errors

The store itself never raises for a missing id; callers that would
rather handle an exception than check for None go through here.
"""

import logging

from concerts.domain import (
    Artist,
    ArtistPatch,
    Concert,
    ConcertDetails,
    ConcertPatch,
    Order,
    OrderItem,
    TicketType,
    TicketTypePatch,
    User,
    UserPatch,
    Venue,
    VenuePatch,
)
from concerts.domain.errors import (
    ArtistNotFoundError,
    ConcertNotFoundError,
    OrderNotFoundError,
    TicketTypeNotFoundError,
    UserNotFoundError,
    VenueNotFoundError,
)
from concerts.stores.interfaces import ConcertStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for concert catalog operations."""

    def __init__(self, store: ConcertStore) -> None:
        self._store = store

    def get_user(self, user_id: int) -> User:
        """Return a user by ID.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        return self._found(self._store.get_user(user_id), UserNotFoundError, user_id)

    def get_user_by_username(self, username: str) -> User:
        """Return a user by username.

        Raises:
            UserNotFoundError: If no user has this username.
        """
        user = self._store.get_user_by_username(username)
        return self._found(user, UserNotFoundError, username)

    def update_user(self, user_id: int, patch: UserPatch) -> User:
        user = self._store.update_user(user_id, patch)
        return self._found(user, UserNotFoundError, user_id)

    def get_artist(self, artist_id: int) -> Artist:
        artist = self._store.get_artist(artist_id)
        return self._found(artist, ArtistNotFoundError, artist_id)

    def update_artist(self, artist_id: int, patch: ArtistPatch) -> Artist:
        artist = self._store.update_artist(artist_id, patch)
        return self._found(artist, ArtistNotFoundError, artist_id)

    def delete_artist(self, artist_id: int) -> None:
        if not self._store.delete_artist(artist_id):
            self._missing(ArtistNotFoundError, artist_id)

    def get_venue(self, venue_id: int) -> Venue:
        venue = self._store.get_venue(venue_id)
        return self._found(venue, VenueNotFoundError, venue_id)

    def update_venue(self, venue_id: int, patch: VenuePatch) -> Venue:
        venue = self._store.update_venue(venue_id, patch)
        return self._found(venue, VenueNotFoundError, venue_id)

    def delete_venue(self, venue_id: int) -> None:
        if not self._store.delete_venue(venue_id):
            self._missing(VenueNotFoundError, venue_id)

    def get_concert(self, concert_id: int) -> Concert:
        concert = self._store.get_concert(concert_id)
        return self._found(concert, ConcertNotFoundError, concert_id)

    def get_concert_details(self, concert_id: int) -> ConcertDetails:
        """Return a concert with venue, artist and ticket types.

        A missing venue or artist is not an error; only a missing concert is.

        Raises:
            ConcertNotFoundError: If the concert does not exist.
        """
        details = self._store.get_concert_with_details(concert_id)
        return self._found(details, ConcertNotFoundError, concert_id)

    def update_concert(self, concert_id: int, patch: ConcertPatch) -> Concert:
        concert = self._store.update_concert(concert_id, patch)
        return self._found(concert, ConcertNotFoundError, concert_id)

    def delete_concert(self, concert_id: int) -> None:
        if not self._store.delete_concert(concert_id):
            self._missing(ConcertNotFoundError, concert_id)

    def get_ticket_types(self, concert_id: int) -> list[TicketType]:
        """Return ticket types of an existing concert.

        Raises:
            ConcertNotFoundError: If the concert does not exist.
        """
        self.get_concert(concert_id)
        return self._store.get_ticket_types_by_concert(concert_id)

    def update_ticket_type(
        self, ticket_type_id: int, patch: TicketTypePatch
    ) -> TicketType:
        ticket_type = self._store.update_ticket_type(ticket_type_id, patch)
        return self._found(ticket_type, TicketTypeNotFoundError, ticket_type_id)

    def delete_ticket_type(self, ticket_type_id: int) -> None:
        if not self._store.delete_ticket_type(ticket_type_id):
            self._missing(TicketTypeNotFoundError, ticket_type_id)

    def get_order(self, order_id: int) -> Order:
        order = self._store.get_order(order_id)
        return self._found(order, OrderNotFoundError, order_id)

    def get_order_items(self, order_id: int) -> list[OrderItem]:
        """Return the items of an existing order.

        Raises:
            OrderNotFoundError: If the order does not exist.
        """
        self.get_order(order_id)
        return self._store.get_order_items_by_order(order_id)

    def _found(self, record, error_cls, lookup):
        if record is None:
            self._missing(error_cls, lookup)
        return record

    @staticmethod
    def _missing(error_cls, lookup) -> None:
        logger.info("%s %r not found", error_cls.entity, lookup)
        raise error_cls(lookup)
