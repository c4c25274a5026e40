from .line_items import LineItem

__all__ = [
    "LineItem",
]
