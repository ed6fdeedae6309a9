"""
Product API schemas (response models).

Request bodies are read as raw JSON and checked by `validation.py` so that
missing fields produce a 400 field map instead of FastAPI's 422.
`price` is emitted as a JSON float; the stored value stays an exact NUMERIC.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class Product(BaseModel):
    id: int
    name: str
    brand: str
    category: str
    price: float
    description: str
    created_at: datetime


class DeleteResponse(BaseModel):
    message: str
