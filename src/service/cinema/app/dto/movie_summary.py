import attrs

from src.service.cinema.domain.entity.movie_entity import Movie


@attrs.define(frozen=True)
class MovieSummary:
    id: str
    title: str
    genre: str
    language: str
    showtime: str
    price: float
    average_rating: float

    @classmethod
    def from_movie(cls, movie: Movie) -> 'MovieSummary':
        return cls(
            id=movie.id,
            title=movie.title,
            genre=movie.genre,
            language=movie.language,
            showtime=movie.showtime,
            price=movie.price,
            average_rating=movie.average_rating(),
        )

    @property
    def rating_label(self) -> str:
        return f'{self.average_rating:.1f}'
