from typing import Dict, List

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.booking_errors import EntityNotFoundError
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.enum.seat_status import SeatStatus


class GetSeatMapUseCase:
    """Seat grid for one movie's hall (1..capacity)"""

    def __init__(self, *, catalog_repo: ICatalogRepo) -> None:
        self.catalog_repo = catalog_repo

    def _get_movie(self, movie_id: str) -> Movie:
        movie = self.catalog_repo.get_movie(movie_id=movie_id)
        if movie is None:
            raise EntityNotFoundError(f'Movie {movie_id} not found')
        return movie

    @Logger.io
    def get_seat_map(self, *, movie_id: str) -> Dict[int, SeatStatus]:
        movie = self._get_movie(movie_id)
        with movie.seat_lock:
            booked = set(movie.booked_seats)
        return {
            seat_id: SeatStatus.BOOKED if seat_id in booked else SeatStatus.FREE
            for seat_id in movie.hall.seat_ids
        }

    @Logger.io
    def list_available_seats(self, *, movie_id: str) -> List[int]:
        seat_map = self.get_seat_map(movie_id=movie_id)
        return [seat_id for seat_id, status in seat_map.items() if status == SeatStatus.FREE]
