"""
In-memory Booking Notification Bus

Synchronous observer registry used by the booking engine to announce
successful bookings.
"""

from itertools import count
from threading import Lock
from typing import Dict, List

from src.platform.event.i_booking_notification_bus import IBookingObserver
from src.platform.logging.loguru_io import Logger


class InMemoryNotificationBusImpl:
    """
    In-memory pub/sub for booking success events

    Architecture:
    - ReserveSeatsUseCase -> publish() -> every registered observer
    - Registry maps subscriber id -> observer, kept in registration order
    - Thread-safe registry; publish iterates over a snapshot so a subscribe
      racing with a publish never mutates the list being delivered

    Failure isolation:
    - An observer that raises is logged with traceback and skipped; the
      remaining observers still receive the event
    """

    def __init__(self) -> None:
        self._subscribers: Dict[int, IBookingObserver] = {}
        self._ids = count(1)
        self._lock = Lock()

    def subscribe(self, observer: IBookingObserver) -> int:
        with self._lock:
            subscriber_id = next(self._ids)
            self._subscribers[subscriber_id] = observer

        Logger.base.debug(
            f'[NOTIFY] Subscribed {type(observer).__name__} as #{subscriber_id} '
            f'(total subscribers: {len(self._subscribers)})'
        )
        return subscriber_id

    def subscribers(self) -> List[IBookingObserver]:
        with self._lock:
            return list(self._subscribers.values())

    def publish(self, *, username: str, movie_title: str) -> int:
        delivered = 0
        failed = 0

        for observer in self.subscribers():
            try:
                observer.on_booking_success(username, movie_title)
                delivered += 1
            except Exception as e:
                failed += 1
                Logger.base.opt(exception=e).error(
                    f'[NOTIFY] {type(observer).__name__} failed for '
                    f"'{movie_title}' ({username}): {type(e).__name__}: {e}"
                )

        Logger.base.info(
            f"[NOTIFY] Booking of '{movie_title}' by {username}: "
            f'delivered={delivered}, failed={failed}'
        )
        return delivered
