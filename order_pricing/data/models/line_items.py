from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class LineItem(BaseModel):
    """A single priced line of an order."""
    model_config = ConfigDict(frozen=True)

    order_id: int = Field(description="Order identifier this line belongs to")
    line_item_id: int = Field(description="Line identifier within the order")
    price: Decimal = Field(description="Exact price of the line")
