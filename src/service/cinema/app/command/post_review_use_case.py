from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.review_result import ReviewResult
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.booking_errors import (
    CINEMA_ERRORS,
    EntityNotFoundError,
    InvalidInputError,
)
from src.service.cinema.domain.value_object.review import Review


class PostReviewUseCase:
    def __init__(self, *, catalog_repo: ICatalogRepo) -> None:
        self.catalog_repo = catalog_repo

    @Logger.io
    def post_review(
        self, *, movie_id: str, author: str, comment: str, rating: float | int | str
    ) -> ReviewResult:
        """
        Attach a review to a movie

        Args:
            movie_id: Reviewed movie
            author: Username of the reviewer
            comment: Free text
            rating: Number in [1, 5]; numeric text is accepted

        Returns:
            ReviewResult with the movie's new average, or the rejection kind and reason
        """
        try:
            movie = self.catalog_repo.get_movie(movie_id=movie_id)
            if movie is None:
                raise EntityNotFoundError(f'Movie {movie_id} not found')

            review = Review(author=author, comment=comment, rating=self._parse_rating(rating))
            movie.reviews.add_review(review)
        except CINEMA_ERRORS as e:
            Logger.base.warning(f'[REVIEW] Rejected review by {author} on {movie_id}: {e.message}')
            return ReviewResult(success=False, error_kind=e.kind, reason=e.message)

        average = movie.average_rating()
        Logger.base.info(
            f"[REVIEW] {author} rated '{movie.title}' {review.rating:g} (average {average:.1f})"
        )
        return ReviewResult(success=True, average_rating=average)

    @staticmethod
    def _parse_rating(rating: float | int | str) -> float:
        if isinstance(rating, bool):
            raise InvalidInputError(f'Invalid rating: {rating}')
        try:
            return float(rating)
        except (TypeError, ValueError):
            raise InvalidInputError(f'Invalid rating: {rating}')
