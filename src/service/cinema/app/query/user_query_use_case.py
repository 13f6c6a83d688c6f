"""
User Query Use Cases (Use Case Layer)
"""

from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_account_repo import IAccountRepo
from src.service.cinema.domain.booking_errors import EntityNotFoundError
from src.service.cinema.domain.entity.user_entity import UserEntity


class UserQueryUseCase:
    def __init__(self, *, account_repo: IAccountRepo) -> None:
        self.account_repo = account_repo

    @Logger.io
    def login(self, *, username: str, password: str) -> Optional[UserEntity]:
        """Returns the user on matching credentials, None otherwise"""
        user = self.account_repo.get_by_username(username=username)
        if user is None or not user.verify_password(password):
            Logger.base.info(f'[LOGIN] Invalid credentials for {username}')
            return None
        return user

    @Logger.io
    def list_bookings(self, *, username: str) -> List[str]:
        user = self.account_repo.get_by_username(username=username)
        if user is None:
            raise EntityNotFoundError(f'User {username} not found')
        return list(user.booking_history)
