"""
summation.py

Equivalent ways of totalling line prices. All of them use exact Decimal
addition starting from zero, so an empty input totals to Decimal("0").
"""

from __future__ import annotations

import operator
from decimal import Decimal
from functools import reduce
from typing import Callable, Iterable, List, Optional

from ..data.models import LineItem

ZERO = Decimal(0)


def sum_prices(lines: Iterable[LineItem]) -> Decimal:
    """Fold the line prices into a single total."""
    return reduce(operator.add, (line.price for line in lines), ZERO)


def sum_prices_loop(lines: Iterable[LineItem]) -> Decimal:
    price = ZERO
    for line in lines:
        price = price + line.price
    return price


def optional_order_price(
    order_id: Optional[int],
    lookup: Callable[[int], List[LineItem]],
) -> Decimal:
    """Absent order -> zero; present order -> look up its lines and fold them."""
    if order_id is None:
        return ZERO
    return sum_prices(lookup(order_id))
