import pytest


@pytest.fixture
def list_movies(container):
    return container.list_movies_use_case()


def test_list_active_returns_summaries(list_movies, inception, parasite):
    summaries = list_movies.list_active()

    assert [summary.title for summary in summaries] == ['Inception', 'Parasite']
    inception_summary = summaries[0]
    assert inception_summary.genre == 'Sci-Fi'
    assert inception_summary.language == 'English'
    assert inception_summary.showtime == '18:00'
    assert inception_summary.price == 12
    assert inception_summary.rating_label == '0.0'


def test_list_active_hides_inactive(container, list_movies, inception, parasite):
    container.catalog_admin_use_case().toggle_active(movie_id=parasite.id)

    assert [summary.title for summary in list_movies.list_active()] == ['Inception']
    assert len(list_movies.list_all()) == 2


@pytest.mark.parametrize(
    'query, expected',
    [
        ('sci', ['Inception']),
        ('SCI-FI', ['Inception']),
        ('thrill', ['Parasite']),
        ('para', ['Parasite']),
        ('', ['Inception', 'Parasite']),
        ('   ', ['Inception', 'Parasite']),
        ('comedy', []),
    ],
)
def test_search(list_movies, inception, parasite, query, expected):
    assert [summary.title for summary in list_movies.search(query)] == expected


def test_search_skips_inactive(container, list_movies, inception, parasite):
    container.catalog_admin_use_case().toggle_active(movie_id=inception.id)

    assert list_movies.search('sci') == []


def test_summary_includes_average_rating(container, list_movies, inception):
    container.post_review_use_case().post_review(
        movie_id=inception.id, author='alice', comment='Great', rating=5
    )
    container.post_review_use_case().post_review(
        movie_id=inception.id, author='bob', comment='Fine', rating=4
    )

    assert list_movies.list_active()[0].rating_label == '4.5'


def test_get_by_title(list_movies, inception, parasite):
    assert list_movies.get_by_title('Parasite') is parasite
    assert list_movies.get_by_title('parasite') is None
