"""Remote services."""

from shoe_inventory.services.shoe_service import ShoeService, ShoeServiceError, get_shoe_service

__all__ = [
    "ShoeService",
    "ShoeServiceError",
    "get_shoe_service",
]
