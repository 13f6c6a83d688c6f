import pytest

from src.platform.exception.exceptions import DomainError
from src.service.cinema.domain.booking_errors import InvalidRequestError
from src.service.cinema.domain.enum.add_on_kind import AddOnKind
from src.service.cinema.domain.pricing_pipeline import PricingPipeline, base_ticket_description


@pytest.fixture
def pipeline() -> PricingPipeline:
    return PricingPipeline(surcharges={AddOnKind.POPCORN: 8.0, AddOnKind.SODA: 4.0})


class TestPricingPipeline:
    def test_no_add_ons_returns_base_price_and_description(self, pipeline):
        quote = pipeline.quote(base_price=12, add_ons=[], base_description='Ticket: Inception')

        assert quote.unit_price == 12
        assert quote.description == 'Ticket: Inception'
        assert pipeline.compute(12, []) == 12

    def test_add_ons_are_additive(self, pipeline):
        assert pipeline.compute(12, [AddOnKind.POPCORN]) == 20
        assert pipeline.compute(12, [AddOnKind.POPCORN, AddOnKind.SODA]) == 24

    def test_total_is_order_independent_but_description_follows_order(self, pipeline):
        popcorn_first = pipeline.quote(
            base_price=10, add_ons=[AddOnKind.POPCORN, AddOnKind.SODA], base_description='Ticket: X'
        )
        soda_first = pipeline.quote(
            base_price=10, add_ons=[AddOnKind.SODA, AddOnKind.POPCORN], base_description='Ticket: X'
        )

        assert popcorn_first.unit_price == soda_first.unit_price == 22
        assert popcorn_first.description == 'Ticket: X, Popcorn, Soda'
        assert soda_first.description == 'Ticket: X, Soda, Popcorn'
        assert popcorn_first.add_ons == (AddOnKind.POPCORN, AddOnKind.SODA)

    def test_same_add_on_twice_is_charged_twice(self, pipeline):
        quote = pipeline.quote(base_price=0, add_ons=['popcorn', 'popcorn'])

        assert quote.unit_price == 16
        assert quote.description == 'Ticket, Popcorn, Popcorn'

    def test_result_never_below_base(self, pipeline):
        for add_ons in ([], [AddOnKind.SODA], [AddOnKind.SODA, AddOnKind.POPCORN]):
            assert pipeline.compute(7.5, add_ons) >= 7.5

    def test_negative_base_price_is_a_defect(self, pipeline):
        with pytest.raises(DomainError):
            pipeline.compute(-1, [])

    def test_unknown_add_on_is_rejected(self, pipeline):
        with pytest.raises(InvalidRequestError, match='Unknown add-on: nachos'):
            pipeline.compute(10, ['nachos'])

    def test_negative_surcharge_rejected_at_construction(self):
        with pytest.raises(DomainError):
            PricingPipeline(surcharges={AddOnKind.POPCORN: -1.0})

    def test_default_surcharges_match_snack_prices(self):
        pipeline = PricingPipeline()

        assert pipeline.compute(0, [AddOnKind.POPCORN]) == 8
        assert pipeline.compute(0, [AddOnKind.SODA]) == 4

    def test_base_ticket_description(self):
        assert base_ticket_description('Inception') == 'Ticket: Inception'
