"""Django ORM implementation of the ConcertStore.

Queries the persistence models in concerts/models.py and converts rows
to domain models. Creation defaults and not-found results match the
in-memory store.
"""

import logging
from collections.abc import Callable
from dataclasses import asdict, fields
from datetime import datetime
from typing import TypeVar

from django.db.models import Max, Min, Model, QuerySet
from django.utils import timezone

from concerts import models
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

logger = logging.getLogger(__name__)

D = TypeVar("D")


def to_domain(domain_cls: type[D], row: Model) -> D:
    """Convert an ORM row to the domain dataclass with the same field names."""
    return domain_cls(**{f.name: getattr(row, f.name) for f in fields(domain_cls)})


def _head(rows: QuerySet, limit: int) -> QuerySet | list:
    """First ``limit`` rows; a negative limit drops rows from the end."""
    if limit < 0:
        return list(rows)[:limit]
    return rows[:limit]


class DjangoConcertStore(ConcertStore):
    """Database-backed concert store using Django ORM."""

    def __init__(self, clock: Callable[[], datetime] = timezone.now) -> None:
        self._clock = clock

    # Users

    def get_user(self, user_id: int) -> User | None:
        return self._get(models.User, User, user_id)

    def get_user_by_username(self, username: str) -> User | None:
        row = models.User.objects.filter(username=username).first()
        return to_domain(User, row) if row is not None else None

    def create_user(self, user: NewUser) -> User:
        row = models.User.objects.create(
            username=user.username,
            password=user.password,
            name=user.name,
            email=user.email,
            phone=user.phone or None,
            address=user.address or None,
            is_admin=user.is_admin,
        )
        logger.debug("Created user %s (%s)", row.pk, row.username)
        return to_domain(User, row)

    def update_user(self, user_id: int, patch: UserPatch) -> User | None:
        return self._update(models.User, User, user_id, patch)

    # Artists

    def get_artist(self, artist_id: int) -> Artist | None:
        return self._get(models.Artist, Artist, artist_id)

    def get_artists(self) -> list[Artist]:
        return [to_domain(Artist, row) for row in models.Artist.objects.all()]

    def get_featured_artists(self, limit: int = 4) -> list[Artist]:
        rows = _head(models.Artist.objects.all(), limit)
        return [to_domain(Artist, row) for row in rows]

    def create_artist(self, artist: NewArtist) -> Artist:
        row = models.Artist.objects.create(
            name=artist.name,
            genre=artist.genre,
            bio=artist.bio or None,
            image_url=artist.image_url or None,
        )
        logger.debug("Created artist %s (%s)", row.pk, row.name)
        return to_domain(Artist, row)

    def update_artist(self, artist_id: int, patch: ArtistPatch) -> Artist | None:
        return self._update(models.Artist, Artist, artist_id, patch)

    def delete_artist(self, artist_id: int) -> bool:
        return self._delete(models.Artist, artist_id)

    # Venues

    def get_venue(self, venue_id: int) -> Venue | None:
        return self._get(models.Venue, Venue, venue_id)

    def get_venues(self) -> list[Venue]:
        return [to_domain(Venue, row) for row in models.Venue.objects.all()]

    def get_top_venues(self, limit: int = 3) -> list[Venue]:
        rows = _head(models.Venue.objects.all(), limit)
        return [to_domain(Venue, row) for row in rows]

    def create_venue(self, venue: NewVenue) -> Venue:
        row = models.Venue.objects.create(
            name=venue.name,
            address=venue.address,
            location=venue.location,
            capacity=venue.capacity,
            image_url=venue.image_url or None,
        )
        logger.debug("Created venue %s (%s)", row.pk, row.name)
        return to_domain(Venue, row)

    def update_venue(self, venue_id: int, patch: VenuePatch) -> Venue | None:
        return self._update(models.Venue, Venue, venue_id, patch)

    def delete_venue(self, venue_id: int) -> bool:
        return self._delete(models.Venue, venue_id)

    # Concerts

    def get_concert(self, concert_id: int) -> Concert | None:
        return self._get(models.Concert, Concert, concert_id)

    def get_concert_with_details(self, concert_id: int) -> ConcertDetails | None:
        concert = self.get_concert(concert_id)
        if concert is None:
            return None
        return ConcertDetails(
            concert=concert,
            venue=self.get_venue(concert.venue_id),
            artist=self.get_artist(concert.artist_id),
            ticket_types=tuple(self.get_ticket_types_by_concert(concert.id)),
        )

    def get_concerts(self) -> list[Concert]:
        return [to_domain(Concert, row) for row in models.Concert.objects.all()]

    def get_featured_concerts(self, limit: int = 3) -> list[ConcertListing]:
        rows = _head(models.Concert.objects.filter(is_featured=True), limit)
        return [self._listing(to_domain(Concert, row)) for row in rows]

    def get_upcoming_concerts(self, limit: int = 6) -> list[ConcertListing]:
        rows = models.Concert.objects.filter(status=UPCOMING).order_by("date", "id")
        if limit:
            rows = _head(rows, limit)
        return [self._listing(to_domain(Concert, row)) for row in rows]

    def get_concerts_by_artist(self, artist_id: int) -> list[Concert]:
        rows = models.Concert.objects.filter(artist_id=artist_id)
        return [to_domain(Concert, row) for row in rows]

    def get_concerts_by_venue(self, venue_id: int) -> list[Concert]:
        rows = models.Concert.objects.filter(venue_id=venue_id)
        return [to_domain(Concert, row) for row in rows]

    def create_concert(self, concert: NewConcert) -> Concert:
        row = models.Concert.objects.create(
            title=concert.title,
            date=ensure_aware(concert.date),
            description=concert.description,
            venue_id=concert.venue_id,
            artist_id=concert.artist_id,
            status=concert.status or UPCOMING,
            is_featured=concert.is_featured or False,
            image_url=concert.image_url or None,
        )
        logger.debug("Created concert %s (%s)", row.pk, row.title)
        return to_domain(Concert, row)

    def update_concert(self, concert_id: int, patch: ConcertPatch) -> Concert | None:
        return self._update(
            models.Concert, Concert, concert_id, aware_concert_patch(patch)
        )

    def delete_concert(self, concert_id: int) -> bool:
        return self._delete(models.Concert, concert_id)

    # Ticket types

    def get_ticket_types_by_concert(self, concert_id: int) -> list[TicketType]:
        rows = models.TicketType.objects.filter(concert_id=concert_id)
        return [to_domain(TicketType, row) for row in rows]

    def create_ticket_type(self, ticket_type: NewTicketType) -> TicketType:
        row = models.TicketType.objects.create(**asdict(ticket_type))
        logger.debug("Created ticket type %s for concert %s", row.pk, row.concert_id)
        return to_domain(TicketType, row)

    def update_ticket_type(
        self, ticket_type_id: int, patch: TicketTypePatch
    ) -> TicketType | None:
        return self._update(models.TicketType, TicketType, ticket_type_id, patch)

    def delete_ticket_type(self, ticket_type_id: int) -> bool:
        return self._delete(models.TicketType, ticket_type_id)

    # Orders

    def get_order(self, order_id: int) -> Order | None:
        return self._get(models.Order, Order, order_id)

    def get_orders_by_user(self, user_id: int) -> list[Order]:
        rows = models.Order.objects.filter(user_id=user_id)
        return [to_domain(Order, row) for row in rows]

    def create_order(self, order: NewOrder) -> Order:
        row = models.Order.objects.create(
            user_id=order.user_id,
            order_date=self._clock(),
            status=order.status or COMPLETED,
        )
        logger.debug("Created order %s for user %s", row.pk, row.user_id)
        return to_domain(Order, row)

    def get_order_items_by_order(self, order_id: int) -> list[OrderItem]:
        rows = models.OrderItem.objects.filter(order_id=order_id)
        return [to_domain(OrderItem, row) for row in rows]

    def create_order_item(self, order_item: NewOrderItem) -> OrderItem:
        row = models.OrderItem.objects.create(**asdict(order_item))
        return to_domain(OrderItem, row)

    # Categories

    def get_categories(self) -> list[Category]:
        return [to_domain(Category, row) for row in models.Category.objects.all()]

    def create_category(self, category: NewCategory) -> Category:
        row = models.Category.objects.create(**asdict(category))
        return to_domain(Category, row)

    def _listing(self, concert: Concert) -> ConcertListing:
        prices = models.TicketType.objects.filter(concert_id=concert.id).aggregate(
            min_price=Min("price"), max_price=Max("price")
        )
        return ConcertListing(
            concert=concert,
            venue=self.get_venue(concert.venue_id),
            artist=self.get_artist(concert.artist_id),
            min_price=prices["min_price"] or 0,
            max_price=prices["max_price"] or 0,
        )

    @staticmethod
    def _get(model: type[Model], domain_cls: type[D], record_id: int) -> D | None:
        row = model.objects.filter(pk=record_id).first()
        return to_domain(domain_cls, row) if row is not None else None

    @staticmethod
    def _update(
        model: type[Model], domain_cls: type[D], record_id: int, patch: Patch
    ) -> D | None:
        row = model.objects.filter(pk=record_id).first()
        if row is None:
            return None
        changes = patch.changes()
        for name, value in changes.items():
            setattr(row, name, value)
        row.save(update_fields=list(changes))
        logger.debug("Updated %s %s: %s", model.__name__, record_id, sorted(changes))
        return to_domain(domain_cls, row)

    @staticmethod
    def _delete(model: type[Model], record_id: int) -> bool:
        deleted, _ = model.objects.filter(pk=record_id).delete()
        if deleted:
            logger.debug("Deleted %s %s", model.__name__, record_id)
        return deleted > 0
