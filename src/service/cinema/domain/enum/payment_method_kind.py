from enum import StrEnum


class PaymentMethodKind(StrEnum):
    CREDIT_CARD = 'credit_card'
    CASH = 'cash'
