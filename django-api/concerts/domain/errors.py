"""Domain error codes for the concerts module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    ARTIST_NOT_FOUND = "ARTIST_NOT_FOUND"
    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    CONCERT_NOT_FOUND = "CONCERT_NOT_FOUND"
    TICKET_TYPE_NOT_FOUND = "TICKET_TYPE_NOT_FOUND"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Raised when a record looked up by id or key does not exist."""

    entity: str
    error_code: ErrorCode

    def __init__(self, lookup: int | str) -> None:
        super().__init__(
            code=self.error_code,
            message=f"{self.entity} not found",
        )
        self.lookup = lookup


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    entity = "User"
    error_code = ErrorCode.USER_NOT_FOUND


class ArtistNotFoundError(NotFoundError):
    """Raised when an artist is not found."""

    entity = "Artist"
    error_code = ErrorCode.ARTIST_NOT_FOUND


class VenueNotFoundError(NotFoundError):
    """Raised when a venue is not found."""

    entity = "Venue"
    error_code = ErrorCode.VENUE_NOT_FOUND


class ConcertNotFoundError(NotFoundError):
    """Raised when a concert is not found."""

    entity = "Concert"
    error_code = ErrorCode.CONCERT_NOT_FOUND


class TicketTypeNotFoundError(NotFoundError):
    """Raised when a ticket type is not found."""

    entity = "Ticket type"
    error_code = ErrorCode.TICKET_TYPE_NOT_FOUND


class OrderNotFoundError(NotFoundError):
    """Raised when an order is not found."""

    entity = "Order"
    error_code = ErrorCode.ORDER_NOT_FOUND
