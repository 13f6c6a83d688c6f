from threading import Lock
from typing import Dict, Optional

from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_account_repo import IAccountRepo
from src.service.cinema.domain.entity.user_entity import UserEntity


class InMemoryAccountRepoImpl(IAccountRepo):
    def __init__(self) -> None:
        self._users: Dict[str, UserEntity] = {}
        self._lock = Lock()

    def add(self, *, user: UserEntity) -> UserEntity:
        with self._lock:
            if user.username in self._users:
                raise ConflictError(f"Username '{user.username}' is already taken")
            self._users[user.username] = user
        Logger.base.info(f'[ACCOUNT] Registered {user.role} {user.username}')
        return user

    def get_by_username(self, *, username: str) -> Optional[UserEntity]:
        with self._lock:
            return self._users.get(username)

    def exists_by_username(self, *, username: str) -> bool:
        with self._lock:
            return username in self._users
