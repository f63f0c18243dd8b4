"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import structlog

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, Stock
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        wanted = name.strip().lower()
        for raw in self._load_raw():
            if raw["name"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> Product:
        products = self._load_raw()

        if product.id is None:
            product.id = max((p["id"] for p in products), default=0) + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(products):
            if raw["id"] == product.id:
                products[i] = self._to_raw(product)
                break
        else:
            products.append(self._to_raw(product))

        self._persist_raw(products)
        logger.debug("product.persisted", product_id=product.id, path=str(self._file_path))
        return product

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=Stock(raw["stock"]),
        )

    # --- File I/O -------------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, products: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(products, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
