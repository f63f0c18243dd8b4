"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductRequest:
    """Input: a product the caller wants added to the catalog."""

    name: str
    price: str | float | int | Decimal
    stock: int


@dataclass(frozen=True)
class ProductResponse:
    """Output: a persisted product as displayed to the user."""

    id: int
    name: str
    price: Decimal
    stock: int
