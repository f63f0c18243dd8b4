"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from decouple import config

from catalog.application.product_mapper import ProductMapper
from catalog.application.product_service import ProductService
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def log_level() -> str:
    return config("CATALOG_LOG_LEVEL", default="INFO")


def log_json() -> bool:
    return config("CATALOG_LOG_JSON", default=False, cast=bool)


def data_dir() -> Path:
    return Path(config("CATALOG_DATA_DIR", default=str(_DEFAULT_DATA_DIR)))


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def product_service() -> ProductService:
    return ProductService(
        product_repo=product_repository(),
        product_mapper=ProductMapper(),
    )
