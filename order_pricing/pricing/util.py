from __future__ import annotations

from typing import Optional

from ..data.interface import LineRepository
from .aggregator import PriceAggregator


def get_price_aggregator(repository: Optional[LineRepository] = None) -> PriceAggregator:
    """Returns a new PriceAggregator using the given or default repository."""
    return PriceAggregator(repository=repository)
