"""In-memory fake repository for testing.

Implements the same abstract interface as the JSON repository
but keeps everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self.save_calls = 0
        for p in products or []:
            self._store[p.id] = p
        self._next_id = max(self._store, default=0) + 1

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.strip().lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> Product:
        self.save_calls += 1
        if product.id is None:
            product.id = self._next_id
            self._next_id += 1
        self._store[product.id] = product
        return product
