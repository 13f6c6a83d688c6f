from src.service.cinema.app.dto.booking_request import BookingRequest
from src.service.cinema.app.dto.booking_result import BookingResult
from src.service.cinema.app.dto.movie_summary import MovieSummary
from src.service.cinema.app.dto.review_result import ReviewResult


__all__ = ['BookingRequest', 'BookingResult', 'MovieSummary', 'ReviewResult']
