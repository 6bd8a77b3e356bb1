from concerts.handlers.serializers import (
    ArtistSerializer,
    CategorySerializer,
    ConcertDetailsSerializer,
    ConcertListingSerializer,
    ConcertSerializer,
    OrderItemSerializer,
    OrderSerializer,
    TicketTypeSerializer,
    UserSerializer,
    VenueSerializer,
)

__all__ = [
    "UserSerializer",
    "ArtistSerializer",
    "VenueSerializer",
    "ConcertSerializer",
    "TicketTypeSerializer",
    "ConcertDetailsSerializer",
    "ConcertListingSerializer",
    "OrderSerializer",
    "OrderItemSerializer",
    "CategorySerializer",
]
