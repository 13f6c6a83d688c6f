from src.service.cinema.domain.value_object.price_quote import PriceQuote
from src.service.cinema.domain.value_object.review import Review


__all__ = ['PriceQuote', 'Review']
