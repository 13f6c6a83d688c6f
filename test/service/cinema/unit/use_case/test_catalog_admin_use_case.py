import pytest

from src.platform.exception.exceptions import ConflictError
from src.service.cinema.app.dto.booking_request import BookingRequest
from src.service.cinema.domain.booking_errors import EntityNotFoundError, InvalidInputError
from src.service.cinema.domain.payment_method import CashPayment


@pytest.fixture
def catalog_admin(container):
    return container.catalog_admin_use_case()


def test_add_hall_and_list(container, catalog_admin):
    catalog_admin.add_hall(name='Hall A', capacity='20')
    catalog_admin.add_hall(name='IMAX Hall', capacity=50)

    halls = container.list_movies_use_case().list_halls()

    assert [(hall.name, hall.capacity) for hall in halls] == [('Hall A', 20), ('IMAX Hall', 50)]


def test_add_hall_duplicate_name(catalog_admin, hall_a):
    with pytest.raises(ConflictError):
        catalog_admin.add_hall(name='Hall A', capacity=10)


@pytest.mark.parametrize('capacity', ['lots', 0])
def test_add_hall_invalid_capacity(catalog_admin, capacity):
    with pytest.raises(InvalidInputError):
        catalog_admin.add_hall(name='Hall B', capacity=capacity)


def test_add_movie_shares_hall(catalog_admin, hall_a):
    first = catalog_admin.add_movie(title='Inception', hall_name='Hall A', price=12)
    second = catalog_admin.add_movie(title='Tenet', hall_name='Hall A', price='11.5')

    assert first.hall is second.hall
    assert second.price == 11.5


def test_add_movie_unknown_hall(catalog_admin):
    with pytest.raises(EntityNotFoundError):
        catalog_admin.add_movie(title='Inception', hall_name='Nowhere', price=12)


def test_add_movie_invalid_price(catalog_admin, hall_a):
    with pytest.raises(InvalidInputError):
        catalog_admin.add_movie(title='Inception', hall_name='Hall A', price='free')


def test_toggle_active(catalog_admin, inception):
    assert catalog_admin.toggle_active(movie_id=inception.id) is False
    assert inception.is_active is False
    assert catalog_admin.toggle_active(movie_id=inception.id) is True


def test_toggle_unknown_movie(catalog_admin):
    with pytest.raises(EntityNotFoundError):
        catalog_admin.toggle_active(movie_id='missing')


def test_remove_movie_keeps_booking_history(
    container, catalog_admin, inception, customer
):
    """
    GIVEN: A customer booked Inception
    WHEN: The admin removes Inception
    THEN: The movie is gone from listings but the customer's history is intact
    """
    container.reserve_seats_use_case().reserve(
        BookingRequest(
            movie_id=inception.id, username='customer', seats=[1], payment_method=CashPayment()
        )
    )

    removed = catalog_admin.remove_movie(movie_id=inception.id)

    assert removed is inception
    assert container.list_movies_use_case().list_all() == []
    assert container.user_query_use_case().list_bookings(username='customer') == [
        '1x [Ticket: Inception] - Total: 12.00'
    ]


def test_remove_unknown_movie(catalog_admin):
    with pytest.raises(EntityNotFoundError):
        catalog_admin.remove_movie(movie_id='missing')
