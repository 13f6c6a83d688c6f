"""
Ticket pricing.

A base ticket price is folded with the selected add-ons, in the order
given: surcharges add up, labels are appended to the receipt line.
"""

from functools import reduce
from typing import Dict, Mapping, Optional, Sequence

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError
from src.service.cinema.domain.booking_errors import InvalidRequestError
from src.service.cinema.domain.enum.add_on_kind import AddOnKind
from src.service.cinema.domain.value_object.price_quote import PriceQuote


def default_surcharges() -> Dict[AddOnKind, float]:
    return {
        AddOnKind.POPCORN: settings.POPCORN_PRICE,
        AddOnKind.SODA: settings.SODA_PRICE,
    }


def base_ticket_description(movie_title: str) -> str:
    return f'Ticket: {movie_title}'


class PricingPipeline:
    def __init__(self, surcharges: Optional[Mapping[AddOnKind, float]] = None) -> None:
        self.surcharges: Dict[AddOnKind, float] = dict(
            default_surcharges() if surcharges is None else surcharges
        )
        if any(amount < 0 for amount in self.surcharges.values()):
            raise DomainError('Add-on surcharges cannot be negative')

    def surcharge_of(self, add_on: AddOnKind | str) -> tuple[AddOnKind, float]:
        try:
            kind = AddOnKind(add_on)
            return kind, self.surcharges[kind]
        except (ValueError, KeyError):
            raise InvalidRequestError(f'Unknown add-on: {add_on}')

    def quote(
        self,
        *,
        base_price: float,
        add_ons: Sequence[AddOnKind | str] = (),
        base_description: str = 'Ticket',
    ) -> PriceQuote:
        """
        Price one ticket with its add-ons

        Args:
            base_price: Movie base price, must be non-negative
            add_ons: Add-ons in application order
            base_description: Receipt line for the bare ticket

        Returns:
            PriceQuote whose description lists add-on labels in application order
        """
        if base_price < 0:
            raise DomainError(f'Base price cannot be negative: {base_price}')

        def apply(quote: PriceQuote, add_on: AddOnKind | str) -> PriceQuote:
            kind, surcharge = self.surcharge_of(add_on)
            return PriceQuote(
                unit_price=quote.unit_price + surcharge,
                description=f'{quote.description}, {kind.label}',
                add_ons=(*quote.add_ons, kind),
            )

        return reduce(
            apply, add_ons, PriceQuote(unit_price=base_price, description=base_description)
        )

    def compute(self, base_price: float, add_ons: Sequence[AddOnKind | str] = ()) -> float:
        return self.quote(base_price=base_price, add_ons=add_ons).unit_price
