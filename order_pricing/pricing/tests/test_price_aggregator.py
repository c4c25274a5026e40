import pytest
from decimal import Decimal

from order_pricing.config import set_config_for_test
from order_pricing.data.backends.memory_backend import InMemoryLineRepository
from order_pricing.data.models import LineItem
from order_pricing.data.seed_data import seed_line_items
from order_pricing.pricing import (
    InvalidArgumentError,
    PriceAggregator,
    PricingMode,
    get_price_aggregator,
)
from order_pricing.pricing.summation import optional_order_price, sum_prices, sum_prices_loop

class RecordingRepository:
    """Wraps the in-memory repository and records every lookup."""
    def __init__(self):
        self.inner = InMemoryLineRepository()
        self.calls = []

    def find_by_order_id(self, order_id):
        self.calls.append(order_id)
        return self.inner.find_by_order_id(order_id)

@pytest.fixture(autouse=True)
def quiet_config():
    set_config_for_test(log_level="WARNING")
    yield

@pytest.fixture
def aggregator():
    return get_price_aggregator()

def test_lenient_order_with_lines(aggregator):
    price = aggregator.get_order_price(1)
    assert price == Decimal("60")
    assert isinstance(price, Decimal)

def test_lenient_order_without_lines(aggregator):
    assert aggregator.get_order_price(2) == Decimal("0")

def test_lenient_absent_order_skips_lookup():
    repo = RecordingRepository()
    aggregator = PriceAggregator(repo)
    assert aggregator.get_order_price(None) == Decimal("0")
    assert repo.calls == []

def test_strict_absent_order_raises_before_lookup():
    repo = RecordingRepository()
    aggregator = PriceAggregator(repo)
    with pytest.raises(InvalidArgumentError, match="Order ID cannot be None"):
        aggregator.get_order_price_strict(None)
    assert repo.calls == []

def test_invalid_argument_is_value_error(aggregator):
    with pytest.raises(ValueError):
        aggregator.get_order_price_strict(None)

@pytest.mark.parametrize("order_id", [1, 2, 0, -1])
def test_strict_matches_lenient_for_present_ids(aggregator, order_id):
    assert aggregator.get_order_price_strict(order_id) == aggregator.get_order_price(order_id)

def test_mode_dispatch(aggregator):
    assert aggregator.get_order_price_for(1, PricingMode.LENIENT) == Decimal("60")
    assert aggregator.get_order_price_for(1, PricingMode.STRICT) == Decimal("60")
    assert aggregator.get_order_price_for(None, "lenient") == Decimal("0")
    with pytest.raises(InvalidArgumentError):
        aggregator.get_order_price_for(None, PricingMode.STRICT)

def test_idempotent_and_seed_untouched(aggregator):
    assert aggregator.get_order_price(1) == aggregator.get_order_price(1)
    assert aggregator.get_order_price_strict(1) == aggregator.get_order_price_strict(1)
    assert aggregator.repository.lines == seed_line_items()

def test_exact_decimal_addition():
    lines = [
        LineItem(order_id=5, line_item_id=1, price=Decimal("0.1")),
        LineItem(order_id=5, line_item_id=2, price=Decimal("0.2")),
    ]
    aggregator = PriceAggregator(InMemoryLineRepository(lines))
    assert aggregator.get_order_price(5) == Decimal("0.3")

def test_summation_variants_agree():
    lines = list(seed_line_items())
    repo = InMemoryLineRepository()
    assert sum_prices(lines) == sum_prices_loop(lines) == Decimal("60")
    assert optional_order_price(1, repo.find_by_order_id) == Decimal("60")
    assert sum_prices([]) == sum_prices_loop([]) == Decimal("0")
    assert optional_order_price(None, repo.find_by_order_id) == Decimal("0")
    assert optional_order_price(2, repo.find_by_order_id) == Decimal("0")
