"""
Booking Notification Bus Interface

In-process fan-out of "booking succeeded" events to the subscribers
registered at startup (email notifier, revenue logger, ...).
"""

from typing import List, Protocol


class IBookingObserver(Protocol):
    def on_booking_success(self, username: str, movie_title: str) -> None: ...


class IBookingNotificationBus(Protocol):
    """
    Interface for booking notification fan-out

    Subscribers are invoked synchronously, in registration order. Registering
    the same observer twice is allowed and results in two deliveries.
    """

    def subscribe(self, observer: IBookingObserver) -> int:
        """
        Register an observer

        Returns:
            Subscriber id (unique per registration)
        """
        ...

    def subscribers(self) -> List[IBookingObserver]:
        """Registered observers in registration order (duplicates included)"""
        ...

    def publish(self, *, username: str, movie_title: str) -> int:
        """
        Deliver one event to every subscriber

        Returns:
            Number of subscribers that handled the event without raising
        """
        ...
