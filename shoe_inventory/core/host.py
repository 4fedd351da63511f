"""Contract between the shoe list controller and the screen host.

The host owns navigation, alerts and confirmation dialogs. The controller
only tells it what to show.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Screen(str, Enum):
    """Navigation targets reachable from the shoe list."""

    EDIT_SHOE = "EditShoe"
    ADD_SHOE = "AddShoe"


@dataclass(frozen=True)
class Notification:
    """One-shot alert with a fixed title and message."""

    title: str
    message: str


@dataclass(frozen=True)
class ConfirmPrompt:
    """Two-choice confirmation dialog."""

    title: str
    message: str
    cancel_label: str
    confirm_label: str
    destructive: bool = False


# Fixed user-facing texts (Vietnamese, as shown by the mobile app)
FETCH_FAILED = Notification("Lỗi", "Không thể tải danh sách sản phẩm")
DELETE_FAILED = Notification("Lỗi", "Không thể xóa sản phẩm!")
DELETE_SUCCEEDED = Notification("Thành công", "Đã xóa sản phẩm!")


def delete_prompt(display_name: str) -> ConfirmPrompt:
    """Build the confirmation shown before deleting a shoe."""
    return ConfirmPrompt(
        title="Xác nhận xóa",
        message=f'Bạn có chắc muốn xóa "{display_name}" không?',
        cancel_label="Hủy",
        confirm_label="Xóa",
        destructive=True,
    )


class ScreenHost(Protocol):
    """Navigation and alerting surface driven by the controller."""

    def navigate(self, screen: Screen, params: dict[str, Any] | None = None) -> None:
        ...

    def notify(self, notification: Notification) -> None:
        ...

    async def confirm(self, prompt: ConfirmPrompt) -> bool:
        """Return True when the user picked the confirm action."""
        ...
