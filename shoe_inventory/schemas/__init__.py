"""Pydantic schemas for shoe service payloads."""

from shoe_inventory.schemas.product import Product, ProductDraft, ServiceResponse

__all__ = [
    "Product",
    "ProductDraft",
    "ServiceResponse",
]
