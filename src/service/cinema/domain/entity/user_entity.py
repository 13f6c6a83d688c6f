from threading import Lock
from typing import List, Tuple

import attrs
from pydantic import SecretStr

from src.platform.logging.loguru_io import Logger
from src.service.cinema.domain.booking_errors import InvalidInputError
from src.service.cinema.domain.enum.user_role import UserRole


def _to_secret(value: str | SecretStr) -> SecretStr:
    return value if isinstance(value, SecretStr) else SecretStr(value)


@attrs.define(eq=False)
class UserEntity:
    """
    Directory user tagged by role.

    Only customers carry a booking history; it is append-only and keeps
    insertion order.
    """

    username: str
    password: SecretStr = attrs.field(converter=_to_secret, repr=False)
    role: UserRole = UserRole.CUSTOMER
    _booking_history: List[str] = attrs.field(factory=list, alias='booking_history')
    _history_lock: Lock = attrs.field(factory=Lock, init=False, repr=False)

    @classmethod
    @Logger.io
    def create(cls, *, role: str | UserRole, username: str, password: str) -> 'UserEntity':
        return cls(
            username=cls.validate_username(username),
            password=password,
            role=cls.validate_role(role),
        )

    @staticmethod
    def validate_role(role: str | UserRole) -> UserRole:
        """Accepts role names case-insensitively ("Customer", "ADMIN", ...)"""
        try:
            return UserRole(str(role).strip().lower())
        except ValueError:
            valid_roles = ', '.join(r.value for r in UserRole)
            raise InvalidInputError(f'Invalid role: {role}. Must be one of: {valid_roles}')

    @staticmethod
    def validate_username(username: str) -> str:
        if not username or not username.strip():
            raise InvalidInputError('Username cannot be empty')
        return username.strip()

    @property
    def is_customer(self) -> bool:
        return self.role == UserRole.CUSTOMER

    @property
    def booking_history(self) -> Tuple[str, ...]:
        with self._history_lock:
            return tuple(self._booking_history)

    def verify_password(self, plain_password: str) -> bool:
        return self.password.get_secret_value() == plain_password

    def record_booking(self, description: str) -> None:
        if not self.is_customer:
            raise InvalidInputError(f'{self.role} accounts have no booking history')
        with self._history_lock:
            self._booking_history.append(description)
