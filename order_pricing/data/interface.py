from __future__ import annotations

from typing import List, Protocol

from .models import LineItem


# ---- Line lookup protocol ----

class LineRepository(Protocol):
    """
    Backend-agnostic contract for looking up the lines of an order.

    - Absence of an order identifier is handled by the caller; implementations
      always receive an int.
    - No match yields an empty list, never None.
    """

    def find_by_order_id(self, order_id: int) -> List[LineItem]:
        """Get the lines of an order, in storage order."""
        ...
