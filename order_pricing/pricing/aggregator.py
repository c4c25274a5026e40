from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from ..data.interface import LineRepository
from ..data.util import get_line_repository
from ..logging import get_logger
from .errors import InvalidArgumentError
from .summation import ZERO, sum_prices


class PricingMode(str, Enum):
    """How an absent order identifier is treated."""
    LENIENT = "lenient"  # absent -> zero
    STRICT = "strict"    # absent -> InvalidArgumentError


class PriceAggregator:
    """Totals the line prices of an order looked up through a LineRepository."""
    def __init__(self, repository: Optional[LineRepository] = None) -> None:
        """Initializes the aggregator, falling back to the default repository."""
        self.repository = repository if repository is not None else get_line_repository()
        self.logger = get_logger(__name__)

    def get_order_price(self, order_id: Optional[int]) -> Decimal:
        """Lenient total for an order.

        Args:
            order_id (Optional[int]): The order identifier, or None.
        Returns:
            Decimal: Sum of the order's line prices. Zero when no identifier is
            given (the repository is not consulted) or no lines match.
        """
        if order_id is None:
            self.logger.debug("No order ID given; order price is zero")
            return ZERO
        return self._total(order_id)

    def get_order_price_strict(self, order_id: Optional[int]) -> Decimal:
        """Strict total for an order.

        Args:
            order_id (Optional[int]): The order identifier.
        Returns:
            Decimal: Sum of the order's line prices, zero when no lines match.
        Raises:
            InvalidArgumentError: If no order identifier is given.
        """
        if order_id is None:
            self.logger.error("Order ID cannot be None")
            raise InvalidArgumentError("Order ID cannot be None")
        return self._total(order_id)

    def get_order_price_for(self, order_id: Optional[int], mode: PricingMode) -> Decimal:
        """Total for an order under an explicitly chosen contract."""
        mode = PricingMode(mode)
        if mode is PricingMode.STRICT:
            return self.get_order_price_strict(order_id)
        return self.get_order_price(order_id)

    def _total(self, order_id: int) -> Decimal:
        lines = self.repository.find_by_order_id(order_id)
        total = sum_prices(lines)
        self.logger.debug(f"Order {order_id}: {len(lines)} line(s), total {total}")
        return total
