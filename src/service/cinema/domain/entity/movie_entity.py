import math
from threading import Lock
from typing import Iterable, List, Optional

import attrs
import uuid_utils

from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.booking_errors import InvalidInputError
from src.service.cinema.domain.entity.hall_entity import Hall
from src.service.cinema.domain.enum.seat_status import SeatStatus
from src.service.cinema.domain.review_aggregator import ReviewAggregator


@attrs.define(frozen=True)
class MovieConfig:
    """
    Fields accepted when building a Movie.

    title and hall are required; price may arrive as text from a form and
    is parsed by Movie.create.
    """

    title: str
    hall: Hall
    genre: str = ''
    language: str = ''
    price: float | int | str = 0
    showtime: str = ''


def _parse_price(raw: float | int | str) -> float:
    if isinstance(raw, bool):
        raise InvalidInputError(f'Invalid price: {raw}')
    try:
        price = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(f'Invalid price: {raw}')

    if not math.isfinite(price) or price < 0:
        raise InvalidInputError('Price must be a non-negative number')
    return price


@attrs.define(eq=False)
class Movie:
    id: str
    title: str
    genre: str
    language: str
    price: float
    showtime: str
    hall: Hall
    is_active: bool = True
    booked_seats: List[int] = attrs.field(factory=list)
    reviews: ReviewAggregator = attrs.field(factory=ReviewAggregator)
    # Serializes availability check + commit for this movie
    seat_lock: Lock = attrs.field(factory=Lock, repr=False)

    @classmethod
    @Logger.io
    def create(cls, config: MovieConfig) -> 'Movie':
        if not config.title or not config.title.strip():
            raise InvalidInputError('Movie title is required')
        if config.hall is None:
            raise InvalidInputError('Movie must be assigned to a hall')

        return cls(
            id=str(uuid_utils.uuid7()),
            title=config.title.strip(),
            genre=config.genre.strip(),
            language=config.language.strip(),
            price=_parse_price(config.price),
            showtime=config.showtime.strip(),
            hall=config.hall,
        )

    def set_active(self, active: bool) -> None:
        self.is_active = active

    def seat_status(self, seat_id: int) -> Optional[SeatStatus]:
        if not self.hall.has_seat(seat_id):
            return None
        return SeatStatus.BOOKED if seat_id in self.booked_seats else SeatStatus.FREE

    def find_booked(self, seat_ids: Iterable[int]) -> List[int]:
        booked = set(self.booked_seats)
        return [seat_id for seat_id in seat_ids if seat_id in booked]

    def book_seats(self, seat_ids: Iterable[int]) -> None:
        """Append seats not booked yet; caller must hold seat_lock"""
        booked = set(self.booked_seats)
        for seat_id in seat_ids:
            if seat_id not in booked:
                self.booked_seats.append(seat_id)
                booked.add(seat_id)

    def average_rating(self) -> float:
        return self.reviews.average_rating()
