"""In-memory implementation of the ConcertStore.

Each collection is a dict keyed by id, which keeps insertion order.
Ids come from one counter per collection and are never reused, so
deleting a record leaves a gap. Records are frozen; an update stores a
new instance in place of the old one.
"""

import itertools
import logging
from collections.abc import Callable
from dataclasses import asdict
from datetime import datetime

from django.utils import timezone

from concerts.domain import (
    COMPLETED,
    UPCOMING,
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
    PriceRange,
    TicketType,
    TicketTypePatch,
    User,
    UserPatch,
    Venue,
    VenuePatch,
)
from concerts.domain.patches import Patch
from concerts.stores.dates import aware_concert_patch, ensure_aware
from concerts.stores.interfaces import ConcertStore
from concerts.stores.seed import seed_store

logger = logging.getLogger(__name__)


class MemoryConcertStore(ConcertStore):
    """Process-local concert store backed by dicts.

    Args:
        seed: Load the sample catalog on construction.
        clock: Returns the current time; used for order dates and the
            seeded concert dates.
    """

    def __init__(
        self,
        seed: bool = True,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._clock = clock

        self._users: dict[int, User] = {}
        self._artists: dict[int, Artist] = {}
        self._venues: dict[int, Venue] = {}
        self._concerts: dict[int, Concert] = {}
        self._ticket_types: dict[int, TicketType] = {}
        self._orders: dict[int, Order] = {}
        self._order_items: dict[int, OrderItem] = {}
        self._categories: dict[int, Category] = {}

        self._user_ids = itertools.count(1)
        self._artist_ids = itertools.count(1)
        self._venue_ids = itertools.count(1)
        self._concert_ids = itertools.count(1)
        self._ticket_type_ids = itertools.count(1)
        self._order_ids = itertools.count(1)
        self._order_item_ids = itertools.count(1)
        self._category_ids = itertools.count(1)

        if seed:
            seed_store(self, now=clock())

    # Users

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    def create_user(self, user: NewUser) -> User:
        created = User(
            id=next(self._user_ids),
            username=user.username,
            password=user.password,
            name=user.name,
            email=user.email,
            phone=user.phone or None,
            address=user.address or None,
            is_admin=user.is_admin,
        )
        self._users[created.id] = created
        logger.debug("Created user %s (%s)", created.id, created.username)
        return created

    def update_user(self, user_id: int, patch: UserPatch) -> User | None:
        return self._update(self._users, user_id, patch)

    # Artists

    def get_artist(self, artist_id: int) -> Artist | None:
        return self._artists.get(artist_id)

    def get_artists(self) -> list[Artist]:
        return list(self._artists.values())

    def get_featured_artists(self, limit: int = 4) -> list[Artist]:
        return self.get_artists()[:limit]

    def create_artist(self, artist: NewArtist) -> Artist:
        created = Artist(
            id=next(self._artist_ids),
            name=artist.name,
            genre=artist.genre,
            bio=artist.bio or None,
            image_url=artist.image_url or None,
        )
        self._artists[created.id] = created
        logger.debug("Created artist %s (%s)", created.id, created.name)
        return created

    def update_artist(self, artist_id: int, patch: ArtistPatch) -> Artist | None:
        return self._update(self._artists, artist_id, patch)

    def delete_artist(self, artist_id: int) -> bool:
        return self._delete(self._artists, artist_id)

    # Venues

    def get_venue(self, venue_id: int) -> Venue | None:
        return self._venues.get(venue_id)

    def get_venues(self) -> list[Venue]:
        return list(self._venues.values())

    def get_top_venues(self, limit: int = 3) -> list[Venue]:
        return self.get_venues()[:limit]

    def create_venue(self, venue: NewVenue) -> Venue:
        created = Venue(
            id=next(self._venue_ids),
            name=venue.name,
            address=venue.address,
            location=venue.location,
            capacity=venue.capacity,
            image_url=venue.image_url or None,
        )
        self._venues[created.id] = created
        logger.debug("Created venue %s (%s)", created.id, created.name)
        return created

    def update_venue(self, venue_id: int, patch: VenuePatch) -> Venue | None:
        return self._update(self._venues, venue_id, patch)

    def delete_venue(self, venue_id: int) -> bool:
        return self._delete(self._venues, venue_id)

    # Concerts

    def get_concert(self, concert_id: int) -> Concert | None:
        return self._concerts.get(concert_id)

    def get_concert_with_details(self, concert_id: int) -> ConcertDetails | None:
        concert = self._concerts.get(concert_id)
        if concert is None:
            return None
        return ConcertDetails(
            concert=concert,
            venue=self._venues.get(concert.venue_id),
            artist=self._artists.get(concert.artist_id),
            ticket_types=tuple(self.get_ticket_types_by_concert(concert.id)),
        )

    def get_concerts(self) -> list[Concert]:
        return list(self._concerts.values())

    def get_featured_concerts(self, limit: int = 3) -> list[ConcertListing]:
        featured = [c for c in self._concerts.values() if c.is_featured]
        return [self._listing(concert) for concert in featured[:limit]]

    def get_upcoming_concerts(self, limit: int = 6) -> list[ConcertListing]:
        upcoming = sorted(
            (c for c in self._concerts.values() if c.status == UPCOMING),
            key=lambda c: c.date,
        )
        if limit:
            upcoming = upcoming[:limit]
        return [self._listing(concert) for concert in upcoming]

    def get_concerts_by_artist(self, artist_id: int) -> list[Concert]:
        return [c for c in self._concerts.values() if c.artist_id == artist_id]

    def get_concerts_by_venue(self, venue_id: int) -> list[Concert]:
        return [c for c in self._concerts.values() if c.venue_id == venue_id]

    def create_concert(self, concert: NewConcert) -> Concert:
        created = Concert(
            id=next(self._concert_ids),
            title=concert.title,
            date=ensure_aware(concert.date),
            description=concert.description,
            venue_id=concert.venue_id,
            artist_id=concert.artist_id,
            status=concert.status or UPCOMING,
            is_featured=concert.is_featured or False,
            image_url=concert.image_url or None,
        )
        self._concerts[created.id] = created
        logger.debug("Created concert %s (%s)", created.id, created.title)
        return created

    def update_concert(self, concert_id: int, patch: ConcertPatch) -> Concert | None:
        return self._update(self._concerts, concert_id, aware_concert_patch(patch))

    def delete_concert(self, concert_id: int) -> bool:
        return self._delete(self._concerts, concert_id)

    # Ticket types

    def get_ticket_types_by_concert(self, concert_id: int) -> list[TicketType]:
        return [t for t in self._ticket_types.values() if t.concert_id == concert_id]

    def create_ticket_type(self, ticket_type: NewTicketType) -> TicketType:
        created = TicketType(id=next(self._ticket_type_ids), **asdict(ticket_type))
        self._ticket_types[created.id] = created
        logger.debug(
            "Created ticket type %s for concert %s", created.id, created.concert_id
        )
        return created

    def update_ticket_type(
        self, ticket_type_id: int, patch: TicketTypePatch
    ) -> TicketType | None:
        return self._update(self._ticket_types, ticket_type_id, patch)

    def delete_ticket_type(self, ticket_type_id: int) -> bool:
        return self._delete(self._ticket_types, ticket_type_id)

    # Orders

    def get_order(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def get_orders_by_user(self, user_id: int) -> list[Order]:
        return [o for o in self._orders.values() if o.user_id == user_id]

    def create_order(self, order: NewOrder) -> Order:
        created = Order(
            id=next(self._order_ids),
            user_id=order.user_id,
            order_date=self._clock(),
            status=order.status or COMPLETED,
        )
        self._orders[created.id] = created
        logger.debug("Created order %s for user %s", created.id, created.user_id)
        return created

    def get_order_items_by_order(self, order_id: int) -> list[OrderItem]:
        return [i for i in self._order_items.values() if i.order_id == order_id]

    def create_order_item(self, order_item: NewOrderItem) -> OrderItem:
        created = OrderItem(id=next(self._order_item_ids), **asdict(order_item))
        self._order_items[created.id] = created
        return created

    # Categories

    def get_categories(self) -> list[Category]:
        return list(self._categories.values())

    def create_category(self, category: NewCategory) -> Category:
        created = Category(id=next(self._category_ids), **asdict(category))
        self._categories[created.id] = created
        return created

    def _listing(self, concert: Concert) -> ConcertListing:
        prices = PriceRange.from_prices(
            t.price for t in self.get_ticket_types_by_concert(concert.id)
        )
        return ConcertListing(
            concert=concert,
            venue=self._venues.get(concert.venue_id),
            artist=self._artists.get(concert.artist_id),
            min_price=prices.min_price,
            max_price=prices.max_price,
        )

    @staticmethod
    def _update(collection: dict, record_id: int, patch: Patch):
        record = collection.get(record_id)
        if record is None:
            return None
        updated = patch.apply(record)
        collection[record_id] = updated
        logger.debug(
            "Updated %s %s: %s",
            type(record).__name__,
            record_id,
            sorted(patch.changes()),
        )
        return updated

    @staticmethod
    def _delete(collection: dict, record_id: int) -> bool:
        record = collection.pop(record_id, None)
        if record is None:
            return False
        logger.debug("Deleted %s %s", type(record).__name__, record_id)
        return True
