"""
seed_data.py

Fixed line item data served by the in-memory repository.

Every line belongs to order 1; any other order identifier has no lines.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Tuple

from .models import LineItem

# (order_id, line_item_id, price)
SEED_ROWS: Tuple[Tuple[int, int, str], ...] = (
    (1, 1, "10"),
    (1, 2, "20"),
    (1, 3, "30"),
)


def seed_line_items() -> Tuple[LineItem, ...]:
    """Build the seed lines in their canonical order."""
    return tuple(
        LineItem(order_id=order_id, line_item_id=line_item_id, price=Decimal(price))
        for order_id, line_item_id, price in SEED_ROWS
    )
