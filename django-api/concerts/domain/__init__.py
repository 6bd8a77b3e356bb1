from concerts.domain.models import (
    COMPLETED,
    UPCOMING,
    Artist,
    Category,
    Concert,
    ConcertDetails,
    ConcertListing,
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
    User,
    Venue,
)
from concerts.domain.patches import (
    UNSET,
    ArtistPatch,
    ConcertPatch,
    TicketTypePatch,
    UserPatch,
    VenuePatch,
)
from concerts.domain.value_objects import PriceRange

__all__ = [
    "UPCOMING",
    "COMPLETED",
    "User",
    "Artist",
    "Venue",
    "Concert",
    "TicketType",
    "Order",
    "OrderItem",
    "Category",
    "ConcertDetails",
    "ConcertListing",
    "NewUser",
    "NewArtist",
    "NewVenue",
    "NewConcert",
    "NewTicketType",
    "NewOrder",
    "NewOrderItem",
    "NewCategory",
    "UNSET",
    "UserPatch",
    "ArtistPatch",
    "VenuePatch",
    "ConcertPatch",
    "TicketTypePatch",
    "PriceRange",
]
