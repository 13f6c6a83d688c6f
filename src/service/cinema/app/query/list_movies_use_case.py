from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.movie_summary import MovieSummary
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.entity.hall_entity import Hall
from src.service.cinema.domain.entity.movie_entity import Movie


class ListMoviesUseCase:
    def __init__(self, *, catalog_repo: ICatalogRepo) -> None:
        self.catalog_repo = catalog_repo

    @Logger.io
    def list_active(self) -> List[MovieSummary]:
        """Browse listing: active movies only, catalog order"""
        movies = [movie for movie in self.catalog_repo.list_movies() if movie.is_active]
        Logger.base.info(f'[LIST_ACTIVE] Found {len(movies)} active movies')
        return [MovieSummary.from_movie(movie) for movie in movies]

    @Logger.io
    def search(self, query: str) -> List[MovieSummary]:
        """Case-insensitive substring match on title or genre; blank query lists everything"""
        needle = (query or '').strip().lower()
        summaries = self.list_active()
        if not needle:
            return summaries

        return [
            summary
            for summary in summaries
            if needle in summary.title.lower() or needle in summary.genre.lower()
        ]

    @Logger.io
    def list_all(self) -> List[Movie]:
        """Admin listing, inactive movies included"""
        return self.catalog_repo.list_movies()

    @Logger.io
    def list_halls(self) -> List[Hall]:
        return self.catalog_repo.list_halls()

    @Logger.io
    def get_by_title(self, title: str) -> Optional[Movie]:
        return next(
            (movie for movie in self.catalog_repo.list_movies() if movie.title == title), None
        )
