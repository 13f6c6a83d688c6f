from src.service.cinema.domain.enum.add_on_kind import AddOnKind
from src.service.cinema.domain.enum.booking_error_kind import BookingErrorKind
from src.service.cinema.domain.enum.payment_method_kind import PaymentMethodKind
from src.service.cinema.domain.enum.seat_status import SeatStatus
from src.service.cinema.domain.enum.user_role import UserRole


__all__ = [
    'AddOnKind',
    'BookingErrorKind',
    'PaymentMethodKind',
    'SeatStatus',
    'UserRole',
]
