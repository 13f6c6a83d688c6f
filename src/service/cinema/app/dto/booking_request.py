"""Booking request DTO."""

from typing import Tuple

import attrs

from src.service.cinema.domain.enum.add_on_kind import AddOnKind
from src.service.cinema.domain.payment_method import PaymentMethod


@attrs.define(frozen=True)
class BookingRequest:
    """
    One reservation attempt by a customer.

    Transient: never stored, only the resulting booking description is.
    """

    movie_id: str
    username: str
    seats: Tuple[int, ...] = attrs.field(converter=tuple)
    payment_method: PaymentMethod
    add_ons: Tuple[AddOnKind | str, ...] = attrs.field(converter=tuple, default=())
