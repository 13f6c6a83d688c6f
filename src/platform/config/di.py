"""
https://python-dependency-injector.ets-labs.org/index.html

One Container per process is the cinema's context object; tests build
their own Container() so state never leaks between them.
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.event.in_memory_notification_bus import InMemoryNotificationBusImpl
from src.service.cinema.app.command.catalog_admin_use_case import CatalogAdminUseCase
from src.service.cinema.app.command.post_review_use_case import PostReviewUseCase
from src.service.cinema.app.command.register_user_use_case import RegisterUserUseCase
from src.service.cinema.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.cinema.app.command.seed_demo_data_use_case import SeedDemoDataUseCase
from src.service.cinema.app.query.get_movie_reviews_use_case import GetMovieReviewsUseCase
from src.service.cinema.app.query.get_seat_map_use_case import GetSeatMapUseCase
from src.service.cinema.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.cinema.app.query.user_query_use_case import UserQueryUseCase
from src.service.cinema.domain.pricing_pipeline import PricingPipeline
from src.service.cinema.driven_adapter.notification.email_notifier import EmailNotifier
from src.service.cinema.driven_adapter.notification.revenue_logger import RevenueLogger
from src.service.cinema.driven_adapter.repo.in_memory_account_repo_impl import (
    InMemoryAccountRepoImpl,
)
from src.service.cinema.driven_adapter.repo.in_memory_catalog_repo_impl import (
    InMemoryCatalogRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Repositories (process-lifetime, in memory)
    catalog_repo = providers.Singleton(InMemoryCatalogRepoImpl)
    account_repo = providers.Singleton(InMemoryAccountRepoImpl)

    # Notification fan-out and its built-in subscribers
    notification_bus = providers.Singleton(InMemoryNotificationBusImpl)
    email_notifier = providers.Singleton(EmailNotifier)
    revenue_logger = providers.Singleton(RevenueLogger)

    # Pure domain services
    pricing_pipeline = providers.Singleton(PricingPipeline)

    # Command use cases
    reserve_seats_use_case = providers.Singleton(
        ReserveSeatsUseCase,
        catalog_repo=catalog_repo,
        account_repo=account_repo,
        pricing_pipeline=pricing_pipeline,
        notification_bus=notification_bus,
    )
    post_review_use_case = providers.Singleton(PostReviewUseCase, catalog_repo=catalog_repo)
    catalog_admin_use_case = providers.Singleton(CatalogAdminUseCase, catalog_repo=catalog_repo)
    register_user_use_case = providers.Singleton(RegisterUserUseCase, account_repo=account_repo)
    seed_demo_data_use_case = providers.Singleton(
        SeedDemoDataUseCase,
        catalog_repo=catalog_repo,
        account_repo=account_repo,
        catalog_admin=catalog_admin_use_case,
        register_user=register_user_use_case,
    )

    # Query use cases
    list_movies_use_case = providers.Singleton(ListMoviesUseCase, catalog_repo=catalog_repo)
    get_seat_map_use_case = providers.Singleton(GetSeatMapUseCase, catalog_repo=catalog_repo)
    get_movie_reviews_use_case = providers.Singleton(
        GetMovieReviewsUseCase, catalog_repo=catalog_repo
    )
    user_query_use_case = providers.Singleton(UserQueryUseCase, account_repo=account_repo)


container = Container()
