"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. A missing record is
reported as ``None`` (lookups, updates) or ``False`` (deletes), never
raised. References between records are not enforced: deleting an
artist, venue or concert leaves its dependents in place.
"""

from abc import ABC, abstractmethod

from concerts.domain import (
    Artist,
    ArtistPatch,
    Category,
    Concert,
    ConcertDetails,
    ConcertListing,
    ConcertPatch,
    NewArtist,
    NewCategory,
    NewConcert,
    NewOrder,
    NewOrderItem,
    NewTicketType,
    NewUser,
    NewVenue,
    Order,
    OrderItem,
    TicketType,
    TicketTypePatch,
    User,
    UserPatch,
    Venue,
    VenuePatch,
)


class ConcertStore(ABC):
    """Interface for concert catalog persistence operations."""

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None:
        """Return the first user with exactly this username, or None."""
        ...

    @abstractmethod
    def create_user(self, user: NewUser) -> User:
        ...

    @abstractmethod
    def update_user(self, user_id: int, patch: UserPatch) -> User | None:
        ...

    # Artists

    @abstractmethod
    def get_artist(self, artist_id: int) -> Artist | None:
        ...

    @abstractmethod
    def get_artists(self) -> list[Artist]:
        """Return all artists in insertion order."""
        ...

    @abstractmethod
    def get_featured_artists(self, limit: int = 4) -> list[Artist]:
        """Return the first ``limit`` artists in insertion order."""
        ...

    @abstractmethod
    def create_artist(self, artist: NewArtist) -> Artist:
        ...

    @abstractmethod
    def update_artist(self, artist_id: int, patch: ArtistPatch) -> Artist | None:
        ...

    @abstractmethod
    def delete_artist(self, artist_id: int) -> bool:
        ...

    # Venues

    @abstractmethod
    def get_venue(self, venue_id: int) -> Venue | None:
        ...

    @abstractmethod
    def get_venues(self) -> list[Venue]:
        """Return all venues in insertion order."""
        ...

    @abstractmethod
    def get_top_venues(self, limit: int = 3) -> list[Venue]:
        """Return the first ``limit`` venues in insertion order."""
        ...

    @abstractmethod
    def create_venue(self, venue: NewVenue) -> Venue:
        ...

    @abstractmethod
    def update_venue(self, venue_id: int, patch: VenuePatch) -> Venue | None:
        ...

    @abstractmethod
    def delete_venue(self, venue_id: int) -> bool:
        ...

    # Concerts

    @abstractmethod
    def get_concert(self, concert_id: int) -> Concert | None:
        ...

    @abstractmethod
    def get_concert_with_details(self, concert_id: int) -> ConcertDetails | None:
        """Return a concert with its venue, artist and ticket types.

        Venue and artist are None when the concert references a missing
        record; only a missing concert yields None.
        """
        ...

    @abstractmethod
    def get_concerts(self) -> list[Concert]:
        """Return all concerts in insertion order."""
        ...

    @abstractmethod
    def get_featured_concerts(self, limit: int = 3) -> list[ConcertListing]:
        """Return the first ``limit`` featured concerts in insertion order."""
        ...

    @abstractmethod
    def get_upcoming_concerts(self, limit: int = 6) -> list[ConcertListing]:
        """Return upcoming concerts ordered by date ascending.

        A falsy ``limit`` returns every upcoming concert.
        """
        ...

    @abstractmethod
    def get_concerts_by_artist(self, artist_id: int) -> list[Concert]:
        ...

    @abstractmethod
    def get_concerts_by_venue(self, venue_id: int) -> list[Concert]:
        ...

    @abstractmethod
    def create_concert(self, concert: NewConcert) -> Concert:
        ...

    @abstractmethod
    def update_concert(self, concert_id: int, patch: ConcertPatch) -> Concert | None:
        ...

    @abstractmethod
    def delete_concert(self, concert_id: int) -> bool:
        ...

    # Ticket types

    @abstractmethod
    def get_ticket_types_by_concert(self, concert_id: int) -> list[TicketType]:
        ...

    @abstractmethod
    def create_ticket_type(self, ticket_type: NewTicketType) -> TicketType:
        ...

    @abstractmethod
    def update_ticket_type(
        self, ticket_type_id: int, patch: TicketTypePatch
    ) -> TicketType | None:
        ...

    @abstractmethod
    def delete_ticket_type(self, ticket_type_id: int) -> bool:
        ...

    # Orders

    @abstractmethod
    def get_order(self, order_id: int) -> Order | None:
        ...

    @abstractmethod
    def get_orders_by_user(self, user_id: int) -> list[Order]:
        ...

    @abstractmethod
    def create_order(self, order: NewOrder) -> Order:
        """Store an order dated now; status defaults to "completed"."""
        ...

    @abstractmethod
    def get_order_items_by_order(self, order_id: int) -> list[OrderItem]:
        ...

    @abstractmethod
    def create_order_item(self, order_item: NewOrderItem) -> OrderItem:
        ...

    # Categories

    @abstractmethod
    def get_categories(self) -> list[Category]:
        ...

    @abstractmethod
    def create_category(self, category: NewCategory) -> Category:
        ...
