import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)


def test_mask_sensitive_hides_password_values():
    masked = mask_sensitive("login(username='alice', password='123')")

    assert '123' not in masked
    assert "password='********'" in masked
    assert "username='alice'" in masked


def test_mask_sensitive_leaves_other_data_untouched():
    data = {'username': 'alice'}

    assert mask_sensitive(data) is data


def test_should_mask_keyword():
    assert should_mask_keyword('password', 'secret') == '********'
    assert should_mask_keyword('card_token', '4111') == '********'
    assert should_mask_keyword('username', 'alice') == 'alice'


def test_truncate_content():
    assert truncate_content('short') == 'short'
    assert truncate_content('x' * 600).endswith('...(+100 chars)')


def test_io_decorator_returns_value():
    @Logger.io
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, b=2) == 3


def test_io_decorator_reraises_domain_errors():
    @Logger.io
    def fail() -> None:
        raise DomainError('boom')

    with pytest.raises(DomainError, match='boom'):
        fail()


def test_io_decorator_can_swallow_when_configured():
    @Logger.io(reraise=False)
    def fail() -> int:
        raise ValueError('boom')

    assert fail() is None
