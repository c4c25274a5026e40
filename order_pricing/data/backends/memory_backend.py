from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..interface import LineRepository
from ..models import LineItem
from ..seed_data import seed_line_items
from ...logging import get_logger


class InMemoryLineRepository(LineRepository):
    """
    In-memory implementation.
    - Holds an immutable tuple of lines (the seed data unless `lines` is given).
    - Every lookup performs a fresh filter pass and returns a new list,
      so callers never share state with the repository.
    """

    def __init__(self, lines: Optional[Sequence[LineItem]] = None) -> None:
        self._lines: Tuple[LineItem, ...] = tuple(seed_line_items() if lines is None else lines)
        self.logger = get_logger(__name__)

    @property
    def lines(self) -> Tuple[LineItem, ...]:
        return self._lines

    def find_by_order_id(self, order_id: int) -> List[LineItem]:
        matches = [line for line in self._lines if line.order_id == order_id]
        self.logger.debug(f"Found {len(matches)} line(s) for order {order_id}")
        return matches
