"""
Product persistence (raw SQL).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from core import db


async def list_products() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, brand, category, price, description, created_at
        FROM products
        """
    )


async def get_product(product_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, brand, category, price, description, created_at
        FROM products
        WHERE id = $1
        """,
        product_id,
    )


async def insert_product(
    *,
    name: str,
    brand: str,
    category: str,
    price: Decimal,
    description: str,
    created_at: datetime,
) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO products (name, brand, category, price, description, created_at)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING id
        """,
        name,
        brand,
        category,
        price,
        description,
        created_at,
    )
    if row is None:
        raise db.DatabaseError("Failed to insert product.")
    return int(row["id"])


async def update_product(
    product_id: int,
    *,
    name: str,
    brand: str,
    category: str,
    price: Decimal,
    description: str,
) -> bool:
    row = await db.fetch_one(
        """
        UPDATE products
        SET name = $2,
            brand = $3,
            category = $4,
            price = $5,
            description = $6
        WHERE id = $1
        RETURNING id
        """,
        product_id,
        name,
        brand,
        category,
        price,
        description,
    )
    return row is not None


async def delete_product(product_id: int) -> bool:
    status = await db.execute(
        """
        DELETE FROM products
        WHERE id = $1
        """,
        product_id,
    )
    return db.affected_rows(status) > 0
