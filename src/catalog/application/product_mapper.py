"""Conversions between Product entities and their DTOs."""

from __future__ import annotations

from catalog.application.dto import ProductRequest, ProductResponse
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, Stock


class ProductMapper:

    @staticmethod
    def to_response(product: Product) -> ProductResponse:
        if product.id is None:
            raise ValidationError(f"Product '{product.name}' has not been saved yet")
        return ProductResponse(
            id=product.id,
            name=product.name,
            price=product.price.amount,
            stock=product.stock.value,
        )

    @staticmethod
    def to_entity(request: ProductRequest) -> Product:
        """Build an unpersisted Product; raises ValidationError on bad values."""
        return Product(
            name=request.name,
            price=Money.of(request.price),
            stock=Stock(request.stock),
        )
