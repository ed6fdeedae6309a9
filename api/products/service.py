"""
Product business logic.

Each handler is a single pass: validate (for writes), run SQL, re-read the
row, and return it. HTTP mapping of the exceptions below lives in `main.py`.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any

from . import repository, schemas
from .validation import parse_price, validate_product

logger = logging.getLogger(__name__)

# products.id is a SERIAL (int4) column.
_ID_PATTERN = re.compile(r"^[+-]?\d+$")
_ID_MIN = -(2**31)
_ID_MAX = 2**31 - 1


class ProductNotFoundError(LookupError):
    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} not found.")
        self.product_id = product_id


class InvalidBodyError(ValueError):
    pass


class ProductValidationError(ValueError):
    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Product payload is not valid.")
        self.errors = errors


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_product_id(raw_id: str) -> int | None:
    """
    Return the integer key for a path id, or None when no row could match it.
    """
    raw = (raw_id or "").strip()
    if not _ID_PATTERN.match(raw):
        return None
    value = int(raw)
    if value < _ID_MIN or value > _ID_MAX:
        return None
    return value


def _to_product(row: dict) -> schemas.Product:
    return schemas.Product(
        id=int(row["id"]),
        name=str(row["name"]),
        brand=str(row["brand"]),
        category=str(row["category"]),
        price=float(row["price"]),
        description=str(row["description"]),
        created_at=row["created_at"],
    )


def _clean_fields(candidate: Any) -> dict[str, Any]:
    is_valid, errors = validate_product(candidate)
    if not is_valid:
        raise ProductValidationError(errors)
    return {
        "name": candidate["name"],
        "brand": candidate["brand"],
        "category": candidate["category"],
        "price": parse_price(candidate["price"]),
        "description": candidate["description"],
    }


async def list_products() -> list[schemas.Product]:
    rows = await repository.list_products()
    return [_to_product(row) for row in rows]


async def get_product(raw_id: str) -> schemas.Product:
    product_id = parse_product_id(raw_id)
    if product_id is None:
        raise ProductNotFoundError(raw_id)

    row = await repository.get_product(product_id)
    if row is None:
        raise ProductNotFoundError(raw_id)
    return _to_product(row)


async def create_product(candidate: Any) -> schemas.Product:
    fields = _clean_fields(candidate)
    product_id = await repository.insert_product(created_at=_utc_now(), **fields)
    logger.info("product_created id=%s", product_id)

    row = await repository.get_product(product_id)
    if row is None:
        # Deleted between insert and re-read.
        raise ProductNotFoundError(str(product_id))
    return _to_product(row)


async def update_product(raw_id: str, candidate: Any) -> schemas.Product:
    fields = _clean_fields(candidate)

    product_id = parse_product_id(raw_id)
    if product_id is None:
        raise ProductNotFoundError(raw_id)

    updated = await repository.update_product(product_id, **fields)
    if not updated:
        raise ProductNotFoundError(raw_id)
    logger.info("product_updated id=%s", product_id)

    row = await repository.get_product(product_id)
    if row is None:
        raise ProductNotFoundError(raw_id)
    return _to_product(row)


async def delete_product(raw_id: str) -> schemas.DeleteResponse:
    product_id = parse_product_id(raw_id)
    deleted = False
    if product_id is not None:
        deleted = await repository.delete_product(product_id)

    if deleted:
        logger.info("product_deleted id=%s", product_id)
    else:
        logger.info("product_delete_noop id=%s", raw_id)
    return schemas.DeleteResponse(message=f"Product with ID {raw_id} deleted successfully")
