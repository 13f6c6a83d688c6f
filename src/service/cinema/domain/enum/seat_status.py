from enum import StrEnum


class SeatStatus(StrEnum):
    """FREE -> BOOKED is the only transition; BOOKED is terminal"""

    FREE = 'free'
    BOOKED = 'booked'
