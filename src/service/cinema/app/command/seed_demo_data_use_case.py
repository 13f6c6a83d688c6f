"""
Demo catalog and accounts for a fresh process.

Seeds only into an empty catalog so running it twice is harmless.
"""

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.catalog_admin_use_case import CatalogAdminUseCase
from src.service.cinema.app.command.register_user_use_case import RegisterUserUseCase
from src.service.cinema.app.interface.i_account_repo import IAccountRepo
from src.service.cinema.app.interface.i_catalog_repo import ICatalogRepo
from src.service.cinema.domain.enum.user_role import UserRole


DEMO_USERS = (
    (UserRole.ADMIN, 'admin', '123'),
    (UserRole.CUSTOMER, 'user', '123'),
)
DEMO_HALLS = (
    ('Hall A', 20),
    ('IMAX Hall', 50),
)
DEMO_MOVIES = (
    {
        'title': 'Inception',
        'genre': 'Sci-Fi',
        'language': 'English',
        'price': 12,
        'showtime': '18:00',
        'hall_name': 'Hall A',
    },
    {
        'title': 'Parasite',
        'genre': 'Thriller',
        'language': 'Korean',
        'price': 10,
        'showtime': '20:00',
        'hall_name': 'IMAX Hall',
    },
)


class SeedDemoDataUseCase:
    def __init__(
        self,
        *,
        catalog_repo: ICatalogRepo,
        account_repo: IAccountRepo,
        catalog_admin: CatalogAdminUseCase,
        register_user: RegisterUserUseCase,
    ) -> None:
        self.catalog_repo = catalog_repo
        self.account_repo = account_repo
        self.catalog_admin = catalog_admin
        self.register_user = register_user

    @Logger.io
    def seed(self) -> bool:
        """Returns False when the catalog already has data"""
        if self.catalog_repo.list_halls() or self.catalog_repo.list_movies():
            Logger.base.info('[SEED] Catalog not empty, skipping demo data')
            return False

        for role, username, password in DEMO_USERS:
            if not self.account_repo.exists_by_username(username=username):
                self.register_user.register(role=role, username=username, password=password)
        for name, capacity in DEMO_HALLS:
            self.catalog_admin.add_hall(name=name, capacity=capacity)
        for fields in DEMO_MOVIES:
            self.catalog_admin.add_movie(**fields)

        Logger.base.info(
            f'[SEED] Seeded {len(DEMO_USERS)} users, {len(DEMO_HALLS)} halls, '
            f'{len(DEMO_MOVIES)} movies'
        )
        return True
