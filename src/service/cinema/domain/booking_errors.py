"""
Cinema domain errors.

Every error carries a BookingErrorKind so use cases can turn it into a
result value for the caller.
"""

from typing import Iterable, Tuple

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.cinema.domain.enum.booking_error_kind import BookingErrorKind


class InvalidRequestError(DomainError):
    kind = BookingErrorKind.INVALID_REQUEST


class InvalidInputError(DomainError):
    kind = BookingErrorKind.INVALID_INPUT


class PaymentDeclinedError(DomainError):
    kind = BookingErrorKind.PAYMENT_DECLINED

    def __init__(self, message: str) -> None:
        super().__init__(message, 402)


class SeatUnavailableError(ConflictError):
    kind = BookingErrorKind.SEAT_UNAVAILABLE

    def __init__(self, conflicting_seats: Iterable[int]) -> None:
        self.conflicting_seats: Tuple[int, ...] = tuple(sorted(conflicting_seats))
        seats = ', '.join(str(seat) for seat in self.conflicting_seats)
        super().__init__(f'Seat(s) already booked: {seats}')


class EntityNotFoundError(NotFoundError):
    kind = BookingErrorKind.NOT_FOUND


CINEMA_ERRORS = (
    InvalidRequestError,
    InvalidInputError,
    PaymentDeclinedError,
    SeatUnavailableError,
    EntityNotFoundError,
)
