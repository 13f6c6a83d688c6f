"""Booking result DTO."""

from typing import Optional, Tuple

import attrs

from src.service.cinema.domain.enum.booking_error_kind import BookingErrorKind


@attrs.define(frozen=True)
class BookingResult:
    success: bool
    total_price: float = 0.0
    receipt: str = ''
    seats: Tuple[int, ...] = ()
    error_kind: Optional[BookingErrorKind] = None
    reason: str = ''
    conflicting_seats: Tuple[int, ...] = ()

    @classmethod
    def confirmed(
        cls, *, total_price: float, receipt: str, seats: Tuple[int, ...]
    ) -> 'BookingResult':
        return cls(success=True, total_price=total_price, receipt=receipt, seats=seats)

    @classmethod
    def rejected(
        cls,
        *,
        error_kind: BookingErrorKind,
        reason: str,
        conflicting_seats: Tuple[int, ...] = (),
    ) -> 'BookingResult':
        return cls(
            success=False,
            error_kind=error_kind,
            reason=reason,
            conflicting_seats=conflicting_seats,
        )
