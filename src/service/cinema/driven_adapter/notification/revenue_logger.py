from collections import Counter
from threading import Lock
from typing import Dict

from src.platform.logging.loguru_io import Logger


class RevenueLogger:
    """Admin-facing sales log: one line and one count per successful booking"""

    def __init__(self) -> None:
        self._sales: Counter[str] = Counter()
        self._lock = Lock()

    @Logger.io
    def on_booking_success(self, username: str, movie_title: str) -> None:
        with self._lock:
            self._sales[movie_title] += 1
        Logger.base.info(f"[ADMIN LOG] New Sale recorded for '{movie_title}'")

    def sales_by_title(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._sales)

    def sales_for(self, movie_title: str) -> int:
        with self._lock:
            return self._sales[movie_title]
