"""
Payment authorization strategies.

Authorization is a pure decision on (amount, method parameters); it never
touches inventory or booking history.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

import attrs

from src.platform.config.core_setting import settings
from src.service.cinema.domain.booking_errors import InvalidRequestError
from src.service.cinema.domain.enum.payment_method_kind import PaymentMethodKind


@attrs.define(frozen=True)
class AuthorizationOutcome:
    accepted: bool
    method: str
    amount: float


class PaymentMethod(ABC):
    label: ClassVar[str]

    @abstractmethod
    def authorize(self, amount: float) -> AuthorizationOutcome: ...

    def __str__(self) -> str:
        return self.label


@attrs.define(frozen=True)
class CreditCardPayment(PaymentMethod):
    label: ClassVar[str] = 'Credit Card'

    card_token: str = attrs.field(repr=False)
    min_token_length: int = settings.CREDIT_CARD_MIN_TOKEN_LENGTH

    def authorize(self, amount: float) -> AuthorizationOutcome:
        # Placeholder acceptance rule, not real card validation
        token = (self.card_token or '').strip()
        return AuthorizationOutcome(
            accepted=len(token) >= self.min_token_length, method=self.label, amount=amount
        )


@attrs.define(frozen=True)
class CashPayment(PaymentMethod):
    label: ClassVar[str] = 'Cash'

    def authorize(self, amount: float) -> AuthorizationOutcome:
        return AuthorizationOutcome(accepted=True, method=self.label, amount=amount)


def build_payment_method(kind: PaymentMethodKind | str, *, card_token: str = '') -> PaymentMethod:
    try:
        method_kind = PaymentMethodKind(kind)
    except ValueError:
        raise InvalidRequestError(f'Unknown payment method: {kind}')

    if method_kind == PaymentMethodKind.CREDIT_CARD:
        return CreditCardPayment(card_token=card_token)
    return CashPayment()
