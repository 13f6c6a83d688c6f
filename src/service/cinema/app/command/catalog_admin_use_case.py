"""
Catalog administration (admin boundary).

Movies and halls are created through validated factories; none of these
operations touch seat inventory.
"""

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.booking_errors import EntityNotFoundError
from src.service.cinema.domain.entity.hall_entity import Hall
from src.service.cinema.domain.entity.movie_entity import Movie, MovieConfig


class CatalogAdminUseCase:
    def __init__(self, *, catalog_repo: ICatalogRepo) -> None:
        self.catalog_repo = catalog_repo

    @Logger.io
    def add_hall(self, *, name: str, capacity: int | str) -> Hall:
        return self.catalog_repo.add_hall(hall=Hall.create(name=name, capacity=capacity))

    @Logger.io
    def add_movie(
        self,
        *,
        title: str,
        hall_name: str,
        genre: str = '',
        language: str = '',
        price: float | int | str = 0,
        showtime: str = '',
    ) -> Movie:
        hall = self.catalog_repo.get_hall(name=hall_name)
        if hall is None:
            raise EntityNotFoundError(f"Hall '{hall_name}' not found")

        movie = Movie.create(
            MovieConfig(
                title=title,
                hall=hall,
                genre=genre,
                language=language,
                price=price,
                showtime=showtime,
            )
        )
        return self.catalog_repo.add_movie(movie=movie)

    @Logger.io
    def remove_movie(self, *, movie_id: str) -> Movie:
        # Booking history keeps text snapshots, so removal never dangles
        movie = self.catalog_repo.remove_movie(movie_id=movie_id)
        if movie is None:
            raise EntityNotFoundError(f'Movie {movie_id} not found')
        return movie

    @Logger.io
    def toggle_active(self, *, movie_id: str) -> bool:
        """Flip a movie's active flag and return the new value"""
        movie = self.catalog_repo.get_movie(movie_id=movie_id)
        if movie is None:
            raise EntityNotFoundError(f'Movie {movie_id} not found')

        with movie.seat_lock:
            movie.set_active(not movie.is_active)

        Logger.base.info(f"[CATALOG] '{movie.title}' active={movie.is_active}")
        return movie.is_active
