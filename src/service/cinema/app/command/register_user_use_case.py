from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_account_repo import IAccountRepo
from src.service.cinema.domain.entity.user_entity import UserEntity
from src.service.cinema.domain.enum.user_role import UserRole


class RegisterUserUseCase:
    def __init__(self, *, account_repo: IAccountRepo) -> None:
        self.account_repo = account_repo

    @Logger.io
    def register(self, *, role: str | UserRole, username: str, password: str) -> UserEntity:
        """
        Raises:
            InvalidInputError: Unknown role or empty username
            ConflictError: Username already taken
        """
        user = UserEntity.create(role=role, username=username, password=password)
        if self.account_repo.exists_by_username(username=user.username):
            raise ConflictError(f"Username '{user.username}' is already taken")
        return self.account_repo.add(user=user)
