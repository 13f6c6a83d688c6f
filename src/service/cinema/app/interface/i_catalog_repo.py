"""
Catalog Repository Interface

Owns Movie and Hall lifetime for the single venue.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.cinema.domain.entity.hall_entity import Hall
from src.service.cinema.domain.entity.movie_entity import Movie


class ICatalogRepo(ABC):
    @abstractmethod
    def add_movie(self, *, movie: Movie) -> Movie:
        pass

    @abstractmethod
    def remove_movie(self, *, movie_id: str) -> Optional[Movie]:
        """
        Remove a movie from the catalog

        Returns:
            The removed movie, or None if it was not in the catalog
        """
        pass

    @abstractmethod
    def get_movie(self, *, movie_id: str) -> Optional[Movie]:
        pass

    @abstractmethod
    def list_movies(self) -> List[Movie]:
        """All movies in insertion order, active or not"""
        pass

    @abstractmethod
    def add_hall(self, *, hall: Hall) -> Hall:
        pass

    @abstractmethod
    def get_hall(self, *, name: str) -> Optional[Hall]:
        pass

    @abstractmethod
    def list_halls(self) -> List[Hall]:
        pass
