import pytest

from src.service.cinema.domain.enum.booking_error_kind import BookingErrorKind
from src.service.cinema.domain.review_aggregator import NO_REVIEWS_TEXT


@pytest.fixture
def post_review(container):
    return container.post_review_use_case()


def test_post_review_updates_average(post_review, inception):
    post_review.post_review(movie_id=inception.id, author='alice', comment='Great', rating=5)
    result = post_review.post_review(movie_id=inception.id, author='bob', comment='Okay', rating=3)

    assert result.success is True
    assert result.average_rating == 4.0
    assert inception.average_rating() == 4.0


@pytest.mark.parametrize('rating', [1, 5, '4'])
def test_boundary_ratings_accepted(post_review, inception, rating):
    result = post_review.post_review(
        movie_id=inception.id, author='alice', comment='-', rating=rating
    )

    assert result.success is True


@pytest.mark.parametrize('rating', [0, 6, 'five', None])
def test_invalid_rating_rejected(post_review, inception, rating):
    result = post_review.post_review(
        movie_id=inception.id, author='alice', comment='-', rating=rating
    )

    assert result.success is False
    assert result.error_kind == BookingErrorKind.INVALID_INPUT
    assert len(inception.reviews) == 0


def test_unknown_movie(post_review):
    result = post_review.post_review(movie_id='missing', author='alice', comment='-', rating=3)

    assert result.error_kind == BookingErrorKind.NOT_FOUND


def test_review_summary_and_average_queries(container, post_review, inception):
    reviews = container.get_movie_reviews_use_case()
    assert reviews.get_summary(movie_id=inception.id) == NO_REVIEWS_TEXT
    assert reviews.get_average_rating(movie_id=inception.id) == 0

    post_review.post_review(movie_id=inception.id, author='alice', comment='Mind-bending', rating=5)
    post_review.post_review(movie_id=inception.id, author='bob', comment='Too long', rating=2)

    assert reviews.get_summary(movie_id=inception.id) == 'alice: Mind-bending\nbob: Too long'
    assert reviews.get_average_rating(movie_id=inception.id) == 3.5
