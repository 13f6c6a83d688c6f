"""
Review aggregation for a single movie.

Average and summary are derived from the full review sequence on every
call, so there is no running state to keep consistent with the list.
"""

from threading import Lock
from typing import List, Tuple

from src.platform.config.core_setting import settings
from src.service.cinema.domain.booking_errors import InvalidInputError
from src.service.cinema.domain.value_object.review import Review


NO_REVIEWS_TEXT = 'No reviews yet.'


class ReviewAggregator:
    def __init__(
        self,
        *,
        min_rating: float = settings.REVIEW_MIN_RATING,
        max_rating: float = settings.REVIEW_MAX_RATING,
    ) -> None:
        self.min_rating = min_rating
        self.max_rating = max_rating
        self._reviews: List[Review] = []
        self._lock = Lock()

    def add_review(self, review: Review) -> None:
        """
        Append a review

        Raises:
            InvalidInputError: When the rating is outside [min_rating, max_rating]
        """
        if not self.min_rating <= review.rating <= self.max_rating:
            raise InvalidInputError(
                f'Rating must be between {self.min_rating:g} and {self.max_rating:g}, '
                f'got {review.rating:g}'
            )
        with self._lock:
            self._reviews.append(review)

    @property
    def reviews(self) -> Tuple[Review, ...]:
        with self._lock:
            return tuple(self._reviews)

    def average_rating(self) -> float:
        reviews = self.reviews
        if not reviews:
            return 0.0
        return sum(review.rating for review in reviews) / len(reviews)

    def summary(self) -> str:
        reviews = self.reviews
        if not reviews:
            return NO_REVIEWS_TEXT
        return '\n'.join(review.render() for review in reviews)

    def __len__(self) -> int:
        return len(self.reviews)

    def __repr__(self) -> str:
        return f'ReviewAggregator(count={len(self)}, average={self.average_rating():.1f})'
