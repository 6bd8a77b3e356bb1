"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in concerts/models.py (persistence layer).

Records carry their store-assigned ``id``. The ``New*`` drafts carry
everything a store needs to create a record; optional fields left out
get the store's creation defaults.
"""

from dataclasses import dataclass
from datetime import datetime

UPCOMING = "upcoming"
COMPLETED = "completed"


@dataclass(frozen=True)
class User:
    """Domain representation of an application user."""

    id: int
    username: str
    password: str
    name: str
    email: str
    phone: str | None
    address: str | None
    is_admin: bool


@dataclass(frozen=True)
class Artist:
    """Domain representation of an Artist."""

    id: int
    name: str
    genre: str
    bio: str | None
    image_url: str | None


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: int
    name: str
    address: str
    location: str
    capacity: int
    image_url: str | None


@dataclass(frozen=True)
class Concert:
    """Domain representation of a Concert."""

    id: int
    title: str
    date: datetime
    description: str
    venue_id: int
    artist_id: int
    status: str
    is_featured: bool
    image_url: str | None


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: int
    concert_id: int
    name: str
    price: int
    quantity: int
    description: str


@dataclass(frozen=True)
class Order:
    """Domain representation of an Order."""

    id: int
    user_id: int
    order_date: datetime
    status: str


@dataclass(frozen=True)
class OrderItem:
    """Domain representation of an OrderItem."""

    id: int
    order_id: int
    ticket_type_id: int
    quantity: int


@dataclass(frozen=True)
class Category:
    """Domain representation of a Category."""

    id: int
    name: str
    icon_class: str


@dataclass(frozen=True)
class NewUser:
    username: str
    password: str
    name: str
    email: str
    phone: str | None = None
    address: str | None = None
    is_admin: bool = False


@dataclass(frozen=True)
class NewArtist:
    name: str
    genre: str
    bio: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class NewVenue:
    name: str
    address: str
    location: str
    capacity: int
    image_url: str | None = None


@dataclass(frozen=True)
class NewConcert:
    title: str
    date: datetime
    description: str
    venue_id: int
    artist_id: int
    status: str | None = None
    is_featured: bool = False
    image_url: str | None = None


@dataclass(frozen=True)
class NewTicketType:
    concert_id: int
    name: str
    price: int
    quantity: int
    description: str


@dataclass(frozen=True)
class NewOrder:
    user_id: int
    status: str | None = None


@dataclass(frozen=True)
class NewOrderItem:
    order_id: int
    ticket_type_id: int
    quantity: int


@dataclass(frozen=True)
class NewCategory:
    name: str
    icon_class: str


@dataclass(frozen=True)
class ConcertDetails:
    """A concert joined with its venue, artist and ticket types.

    ``venue`` and ``artist`` are None when the concert references a
    record that no longer exists.
    """

    concert: Concert
    venue: Venue | None
    artist: Artist | None
    ticket_types: tuple[TicketType, ...] = ()


@dataclass(frozen=True)
class ConcertListing:
    """A concert as shown in featured and upcoming listings."""

    concert: Concert
    venue: Venue | None
    artist: Artist | None
    min_price: int
    max_price: int
