
import attrs

from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.booking_errors import InvalidInputError


@attrs.define(frozen=True)
class Hall:
    name: str
    capacity: int

    @classmethod
    @Logger.io
    def create(cls, *, name: str, capacity: int | str) -> 'Hall':
        if not name or not name.strip():
            raise InvalidInputError('Hall name cannot be empty')

        if isinstance(capacity, bool) or (
            isinstance(capacity, float) and not capacity.is_integer()
        ):
            raise InvalidInputError(f'Invalid hall capacity: {capacity}')
        try:
            parsed = int(capacity)
        except (TypeError, ValueError):
            raise InvalidInputError(f'Invalid hall capacity: {capacity}')

        if parsed <= 0:
            raise InvalidInputError('Hall capacity must be greater than 0')

        return cls(name=name.strip(), capacity=parsed)

    @property
    def seat_ids(self) -> range:
        return range(1, self.capacity + 1)

    def has_seat(self, seat_id: int) -> bool:
        return 1 <= seat_id <= self.capacity

    def __str__(self) -> str:
        return f'{self.name} ({self.capacity} seats)'
