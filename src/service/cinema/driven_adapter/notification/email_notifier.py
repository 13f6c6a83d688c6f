"""Mock email notifier for booking confirmations."""

from datetime import datetime
from threading import Lock
from typing import List

from src.platform.logging.loguru_io import Logger


class EmailNotifier:
    """Mock email service that logs instead of sending real emails."""

    def __init__(self) -> None:
        self.sent_emails: List[dict] = []  # Store sent emails for testing
        self._lock = Lock()

    @Logger.io
    def on_booking_success(self, username: str, movie_title: str) -> None:
        email_data = {
            'to': username,
            'subject': f'Booking Confirmation - {movie_title}',
            'body': (
                f'Dear {username},\n\n'
                f'Your tickets for {movie_title} are confirmed. Enjoy the show!'
            ),
            'sent_at': datetime.now(),
        }
        with self._lock:
            self.sent_emails.append(email_data)

        Logger.base.info(f'[EMAIL SENT] To: {username} | Ticket: {movie_title}')
