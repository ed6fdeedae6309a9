"""
Products CRUD API endpoints.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Request

from . import schemas, service

router = APIRouter(prefix="/api/products")


async def _read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise service.InvalidBodyError("Request body must be valid JSON") from exc


@router.get("", response_model=list[schemas.Product])
async def list_products() -> list[schemas.Product]:
    return await service.list_products()


@router.get("/{product_id}", response_model=schemas.Product)
async def get_product(product_id: str) -> schemas.Product:
    return await service.get_product(product_id)


@router.post("", response_model=schemas.Product)
async def create_product(request: Request) -> schemas.Product:
    """
    Validate the body, insert it with a server-side `created_at`, and return
    the stored row.
    """
    payload = await _read_json_body(request)
    return await service.create_product(payload)


@router.put("/{product_id}", response_model=schemas.Product)
async def update_product(product_id: str, request: Request) -> schemas.Product:
    """
    Replace the five editable fields. `id` and `created_at` never change.
    """
    payload = await _read_json_body(request)
    return await service.update_product(product_id, payload)


@router.delete("/{product_id}", response_model=schemas.DeleteResponse)
async def delete_product(product_id: str) -> schemas.DeleteResponse:
    return await service.delete_product(product_id)
