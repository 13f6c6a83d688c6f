from typing import Tuple

import attrs

from src.service.cinema.domain.enum.add_on_kind import AddOnKind


@attrs.define(frozen=True)
class PriceQuote:
    """Per-ticket price with the receipt line describing what it covers"""

    unit_price: float
    description: str
    add_ons: Tuple[AddOnKind, ...] = ()

    def total_for(self, quantity: int) -> float:
        return self.unit_price * quantity
