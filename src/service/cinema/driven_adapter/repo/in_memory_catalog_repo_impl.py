"""
In-memory Catalog Repository

Process-lifetime storage for movies and halls; nothing survives a restart.
"""

from threading import Lock
from typing import Dict, List, Optional

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.entity.hall_entity import Hall
from src.service.cinema.domain.entity.movie_entity import Movie


class InMemoryCatalogRepoImpl(ICatalogRepo):
    def __init__(self) -> None:
        # dicts keep insertion order, which is the listing order
        self._movies: Dict[str, Movie] = {}
        self._halls: Dict[str, Hall] = {}
        self._lock = Lock()

    def add_movie(self, *, movie: Movie) -> Movie:
        with self._lock:
            if movie.id in self._movies:
                raise ConflictError(f'Movie {movie.id} already exists')
            self._movies[movie.id] = movie
        Logger.base.info(f"[CATALOG] Added movie '{movie.title}' ({movie.id}) in {movie.hall.name}")
        return movie

    def remove_movie(self, *, movie_id: str) -> Optional[Movie]:
        with self._lock:
            movie = self._movies.pop(movie_id, None)
        if movie:
            Logger.base.info(f"[CATALOG] Removed movie '{movie.title}' ({movie_id})")
        return movie

    def get_movie(self, *, movie_id: str) -> Optional[Movie]:
        with self._lock:
            return self._movies.get(movie_id)

    def list_movies(self) -> List[Movie]:
        with self._lock:
            return list(self._movies.values())

    def add_hall(self, *, hall: Hall) -> Hall:
        with self._lock:
            if hall.name in self._halls:
                raise ConflictError(f"Hall '{hall.name}' already exists")
            self._halls[hall.name] = hall
        Logger.base.info(f'[CATALOG] Added hall {hall}')
        return hall

    def get_hall(self, *, name: str) -> Optional[Hall]:
        with self._lock:
            return self._halls.get(name)

    def list_halls(self) -> List[Hall]:
        with self._lock:
            return list(self._halls.values())
