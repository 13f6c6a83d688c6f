from abc import ABC, abstractmethod
from typing import Optional

from src.service.cinema.domain.entity.user_entity import UserEntity


class IAccountRepo(ABC):
    """Account directory; usernames are unique"""

    @abstractmethod
    def add(self, *, user: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    def get_by_username(self, *, username: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    def exists_by_username(self, *, username: str) -> bool:
        pass
