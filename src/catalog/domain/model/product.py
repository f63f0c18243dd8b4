"""Product entity.

A product is identified by the integer id its repository assigns on the
first save, and by a catalog-wide unique name.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money, Stock


@dataclass
class Product:
    """A product in the catalog.

    ``id`` stays None until a repository persists the product.
    """

    name: str
    price: Money
    stock: Stock
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValidationError(
                f"Product name must be a string, got {type(self.name).__name__}"
            )
        if not self.name.strip():
            raise ValidationError("Product name is required")
        self.name = self.name.strip()

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
