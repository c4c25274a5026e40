from __future__ import annotations

from typing import Literal

from .backends.memory_backend import InMemoryLineRepository
from .interface import LineRepository


def get_line_repository(kind: Literal["memory"] = "memory") -> LineRepository:
    if kind == "memory":
        # Serves the fixed seed lines
        return InMemoryLineRepository()
    raise ValueError(f"Unknown line repository kind: {kind}")
