from typing import List, Tuple

from opentelemetry import trace

from src.platform.event.i_booking_notification_bus import IBookingNotificationBus
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.dto.booking_request import BookingRequest
from src.service.cinema.app.dto.booking_result import BookingResult
from src.service.cinema.app.interface.i_account_repo import IAccountRepo
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.booking_errors import (
    CINEMA_ERRORS,
    EntityNotFoundError,
    InvalidRequestError,
    PaymentDeclinedError,
    SeatUnavailableError,
)
from src.service.cinema.domain.entity.movie_entity import Movie
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.domain.pricing_pipeline import PricingPipeline, base_ticket_description


class ReserveSeatsUseCase:
    """
    Reserve seats - the booking transaction

    Flow:
    1. Validate request (seats, movie active, acting customer)
    2. Under the movie's seat lock:
       a. Availability check (all requested seats FREE)
       b. Price = (base + add-ons) * seat count
       c. Payment authorization
       d. Commit: mark seats BOOKED, append the customer's booking history
    3. Publish the booking to every notification subscriber
    4. Return the confirmed result

    Any rejection happens before the commit, so a rejected request leaves
    inventory and history untouched. Notification runs after the lock is
    released and cannot fail the booking.
    """

    def __init__(
        self,
        *,
        catalog_repo: ICatalogRepo,
        account_repo: IAccountRepo,
        pricing_pipeline: PricingPipeline,
        notification_bus: IBookingNotificationBus,
    ) -> None:
        self.catalog_repo = catalog_repo
        self.account_repo = account_repo
        self.pricing_pipeline = pricing_pipeline
        self.notification_bus = notification_bus
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def reserve(self, request: BookingRequest) -> BookingResult:
        with self.tracer.start_as_current_span(
            'use_case.reserve_seats',
            attributes={
                'movie.id': request.movie_id,
                'booking.seat_count': len(request.seats),
            },
        ):
            try:
                movie, customer, result = self._reserve_and_commit(request)
            except CINEMA_ERRORS as e:
                Logger.base.warning(
                    f'[RESERVE] Rejected {request.username} on movie {request.movie_id}: '
                    f'{e.kind} - {e.message}'
                )
                return BookingResult.rejected(
                    error_kind=e.kind,
                    reason=e.message,
                    conflicting_seats=getattr(e, 'conflicting_seats', ()),
                )

            self.notification_bus.publish(username=customer.username, movie_title=movie.title)
            return result

    def _reserve_and_commit(
        self, request: BookingRequest
    ) -> Tuple[Movie, UserEntity, BookingResult]:
        movie = self.catalog_repo.get_movie(movie_id=request.movie_id)
        if movie is None:
            raise EntityNotFoundError(f'Movie {request.movie_id} not found')

        customer = self.account_repo.get_by_username(username=request.username)
        if customer is None:
            raise EntityNotFoundError(f'User {request.username} not found')
        if not customer.is_customer:
            raise InvalidRequestError(f'Only customers can book tickets ({customer.role})')

        seats = self._validate_seats(request.seats, movie)

        with movie.seat_lock:
            if not movie.is_active:
                raise InvalidRequestError(f"Movie '{movie.title}' is not active")

            if conflicting := movie.find_booked(seats):
                raise SeatUnavailableError(conflicting)

            quote = self.pricing_pipeline.quote(
                base_price=movie.price,
                add_ons=request.add_ons,
                base_description=base_ticket_description(movie.title),
            )
            total = quote.total_for(len(seats))

            outcome = request.payment_method.authorize(total)
            if not outcome.accepted:
                raise PaymentDeclinedError(f'{outcome.method} payment of {total:.2f} was declined')

            history_entry = f'{len(seats)}x [{quote.description}] - Total: {total:.2f}'
            movie.book_seats(seats)
            customer.record_booking(history_entry)

        Logger.base.info(
            f"[RESERVE] {customer.username} booked seats {list(seats)} for '{movie.title}' "
            f'total={total:.2f} via {outcome.method}'
        )
        receipt = (
            f'{history_entry} | Seats: {", ".join(str(seat) for seat in seats)} '
            f'| Paid by: {outcome.method}'
        )
        return movie, customer, BookingResult.confirmed(
            total_price=total, receipt=receipt, seats=seats
        )

    @staticmethod
    def _validate_seats(raw_seats: Tuple[int, ...], movie: Movie) -> Tuple[int, ...]:
        if not raw_seats:
            raise InvalidRequestError('At least one seat must be selected')

        seats: List[int] = []
        for seat in raw_seats:
            if isinstance(seat, bool) or not isinstance(seat, int):
                raise InvalidRequestError(f'Invalid seat identifier: {seat!r}')
            if not movie.hall.has_seat(seat):
                raise InvalidRequestError(
                    f'Seat {seat} is outside 1..{movie.hall.capacity} for {movie.hall.name}'
                )
            if seat in seats:
                raise InvalidRequestError(f'Seat {seat} requested more than once')
            seats.append(seat)

        return tuple(seats)
