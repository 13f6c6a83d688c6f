from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.booking_errors import EntityNotFoundError
from src.service.cinema.domain.review_aggregator import ReviewAggregator


class GetMovieReviewsUseCase:
    def __init__(self, *, catalog_repo: ICatalogRepo) -> None:
        self.catalog_repo = catalog_repo

    def _get_reviews(self, movie_id: str) -> ReviewAggregator:
        movie = self.catalog_repo.get_movie(movie_id=movie_id)
        if movie is None:
            raise EntityNotFoundError(f'Movie {movie_id} not found')
        return movie.reviews

    @Logger.io
    def get_summary(self, *, movie_id: str) -> str:
        return self._get_reviews(movie_id).summary()

    @Logger.io
    def get_average_rating(self, *, movie_id: str) -> float:
        return self._get_reviews(movie_id).average_rating()
