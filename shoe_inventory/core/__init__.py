"""Core module - shoe list state, screen host contract and controller."""

from shoe_inventory.core.host import ConfirmPrompt, Notification, Screen, ScreenHost
from shoe_inventory.core.list_state import ShoeListState
from shoe_inventory.core.shoe_list_controller import ShoeListController

__all__ = [
    "ConfirmPrompt",
    "Notification",
    "Screen",
    "ScreenHost",
    "ShoeListController",
    "ShoeListState",
]
