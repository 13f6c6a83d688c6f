from enum import StrEnum


class BookingErrorKind(StrEnum):
    INVALID_REQUEST = 'invalid_request'
    SEAT_UNAVAILABLE = 'seat_unavailable'
    PAYMENT_DECLINED = 'payment_declined'
    INVALID_INPUT = 'invalid_input'
    NOT_FOUND = 'not_found'
