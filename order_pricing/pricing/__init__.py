from .aggregator import PriceAggregator, PricingMode
from .errors import InvalidArgumentError
from .util import get_price_aggregator

__all__ = [
    "PriceAggregator",
    "PricingMode",
    "InvalidArgumentError",
    "get_price_aggregator",
]
