"""Application service for the product catalog.

Business rules enforced here:
- A product can only be saved while its stock is below ``MAX_STOCK``.
- Product names are unique across the catalog.
- Looking up an unknown id is an error, not an empty result.

Both save gates run before anything is written, so a rejected request
never reaches ``ProductRepository.save``.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import ProductRequest, ProductResponse
from catalog.application.product_mapper import ProductMapper
from catalog.domain.exceptions import (
    ProductAlreadyExistsError,
    ProductNotFoundError,
    StockOutOfRangeError,
)
from catalog.domain.model.value_objects import Stock
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

# Exclusive upper bound for the stock of a newly saved product.
MAX_STOCK = 20


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        product_mapper: ProductMapper | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._product_mapper = product_mapper or ProductMapper()

    def find_by_id(self, product_id: int) -> ProductResponse:
        """Return the product stored under ``product_id``.

        Raises:
            ProductNotFoundError: if no product has that id.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("product.not_found", product_id=product_id)
            raise ProductNotFoundError(f"Product with ID '{product_id}' not found")
        logger.debug("product.retrieved", product_id=product_id)
        return self._product_mapper.to_response(product)

    def find_all(self) -> list[ProductResponse]:
        products = sorted(self._product_repo.list_all(), key=lambda p: p.id or 0)
        return [self._product_mapper.to_response(p) for p in products]

    def save(self, request: ProductRequest) -> ProductResponse:
        """Add a new product to the catalog.

        Raises:
            StockOutOfRangeError: if ``request.stock`` is ``MAX_STOCK`` or more.
            ProductAlreadyExistsError: if the name is already taken.
            ValidationError: if the name is empty, price or stock is negative,
                or stock is not an integer.
        """
        log = logger.bind(name=request.name)

        stock = Stock(request.stock)
        if stock.value >= MAX_STOCK:
            log.warning("product.stock_out_of_range", stock=stock.value)
            raise StockOutOfRangeError(
                f"Stock must be less than {MAX_STOCK}, got {stock.value}"
            )

        candidate = self._product_mapper.to_entity(request)

        if self._product_repo.get_by_name(candidate.name) is not None:
            log.warning("product.duplicate_name")
            raise ProductAlreadyExistsError(
                f"Product '{candidate.name}' already exists"
            )

        saved = self._product_repo.save(candidate)
        log.info("product.created", product_id=saved.id)
        return self._product_mapper.to_response(saved)
