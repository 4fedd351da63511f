"""Infrastructure - logging."""

from shoe_inventory.infra.logging import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
