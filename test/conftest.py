"""
Test Configuration and Fixtures

This module provides:
- Test log directory isolation (must be set before src modules are imported)
- A fresh DI container per test, so catalog, accounts and subscribers never leak
- Catalog/account fixtures mirroring the demo venue
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'cinema-test')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import Container  # noqa: E402
from src.service.cinema.domain.entity.movie_entity import Movie  # noqa: E402
from src.service.cinema.domain.entity.user_entity import UserEntity  # noqa: E402
from src.service.cinema.domain.enum.user_role import UserRole  # noqa: E402


CUSTOMER_USERNAME = 'customer'
ANOTHER_CUSTOMER_USERNAME = 'another_customer'
ADMIN_USERNAME = 'admin'
DEFAULT_PASSWORD = 'P@ssw0rd'


@pytest.fixture
def container() -> Generator[Container, None, None]:
    test_container = Container()
    yield test_container
    test_container.reset_singletons()


@pytest.fixture
def hall_a(container: Container):
    return container.catalog_admin_use_case().add_hall(name='Hall A', capacity=20)


@pytest.fixture
def imax_hall(container: Container):
    return container.catalog_admin_use_case().add_hall(name='IMAX Hall', capacity=50)


@pytest.fixture
def inception(container: Container, hall_a) -> Movie:
    return container.catalog_admin_use_case().add_movie(
        title='Inception',
        genre='Sci-Fi',
        language='English',
        price=12,
        showtime='18:00',
        hall_name=hall_a.name,
    )


@pytest.fixture
def parasite(container: Container, imax_hall) -> Movie:
    return container.catalog_admin_use_case().add_movie(
        title='Parasite',
        genre='Thriller',
        language='Korean',
        price=10,
        showtime='20:00',
        hall_name=imax_hall.name,
    )


@pytest.fixture
def customer(container: Container) -> UserEntity:
    return container.register_user_use_case().register(
        role=UserRole.CUSTOMER, username=CUSTOMER_USERNAME, password=DEFAULT_PASSWORD
    )


@pytest.fixture
def another_customer(container: Container) -> UserEntity:
    return container.register_user_use_case().register(
        role=UserRole.CUSTOMER, username=ANOTHER_CUSTOMER_USERNAME, password=DEFAULT_PASSWORD
    )


@pytest.fixture
def admin(container: Container) -> UserEntity:
    return container.register_user_use_case().register(
        role=UserRole.ADMIN, username=ADMIN_USERNAME, password=DEFAULT_PASSWORD
    )
