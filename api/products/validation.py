"""
Required-field checks for product payloads.

All rules run on every call so the caller gets the full error map at once.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

MESSAGES = {
    "name": "The name is required",
    "brand": "The brand is required",
    "category": "The category is required",
    "price": "The price is not valid",
    "description": "The description is required",
}


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value == ""


def parse_price(value: Any) -> Decimal | None:
    """
    Return the price as a Decimal, or None when it is missing, zero,
    non-numeric or not finite.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float, Decimal)):
        raw = str(value)
    elif isinstance(value, str):
        raw = value.strip()
    else:
        return None

    try:
        price = Decimal(raw)
    except InvalidOperation:
        return None
    if not price.is_finite() or price == 0:
        return None
    return price


def validate_product(candidate: Any) -> tuple[bool, dict[str, str]]:
    if not isinstance(candidate, dict):
        candidate = {}

    errors: dict[str, str] = {}
    for field in ("name", "brand", "category"):
        if _is_blank(candidate.get(field)):
            errors[field] = MESSAGES[field]

    if parse_price(candidate.get("price")) is None:
        errors["price"] = MESSAGES["price"]

    if _is_blank(candidate.get("description")):
        errors["description"] = MESSAGES["description"]

    return (not errors, errors)
