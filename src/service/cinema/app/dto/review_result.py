from typing import Optional

import attrs

from src.service.cinema.domain.enum.booking_error_kind import BookingErrorKind


@attrs.define(frozen=True)
class ReviewResult:
    success: bool
    average_rating: float = 0.0
    error_kind: Optional[BookingErrorKind] = None
    reason: str = ''
