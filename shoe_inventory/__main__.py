"""Allow running as ``python -m shoe_inventory``."""

from shoe_inventory.cli import entrypoint

entrypoint()
