"""Terminal implementation of the screen host."""

import asyncio
import sys
from typing import Any, Callable, TextIO

from shoe_inventory.core.host import ConfirmPrompt, Notification, Screen
from shoe_inventory.core.list_state import ShoeListState
from shoe_inventory.schemas.product import Product

TITLE = "DANH SÁCH GIÀY"
YES_ANSWERS = {"y", "yes", "c", "co", "có"}


def format_product(item: Product) -> str:
    """Render one shoe as a text card."""
    return "\n".join(
        [
            f"{item.name}  (#{item.id})",
            f"  Mã: {item.code}",
            f"  Giá: {item.price} VNĐ",
            f"  Size: {item.size}",
        ]
    )


class ConsoleHost:
    """Screen host that prints to a text stream and reads answers from input."""

    def __init__(
        self,
        stream: TextIO | None = None,
        input_func: Callable[[str], str] = input,
        assume_yes: bool = False,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.input_func = input_func
        self.assume_yes = assume_yes

    def write(self, text: str) -> None:
        print(text, file=self.stream)

    def navigate(self, screen: Screen, params: dict[str, Any] | None = None) -> None:
        if params and isinstance(params.get("shoe"), Product):
            self.write(f"-> {screen.value}: {params['shoe'].name}")
        else:
            self.write(f"-> {screen.value}")

    def notify(self, notification: Notification) -> None:
        self.write(f"{notification.title}: {notification.message}")

    async def confirm(self, prompt: ConfirmPrompt) -> bool:
        question = (
            f"{prompt.title}\n{prompt.message} "
            f"[y = {prompt.confirm_label} / N = {prompt.cancel_label}] "
        )
        if self.assume_yes:
            self.write(question + "y")
            return True

        try:
            answer = await asyncio.to_thread(self.input_func, question)
        except EOFError:
            return False
        return answer.strip().lower() in YES_ANSWERS

    def render(self, state: ShoeListState) -> None:
        """Print the list, or a loading line before the first fetch lands."""
        if state.loading:
            self.write("Đang tải...")
            return

        self.write(TITLE)
        for item in state.items:
            self.write(format_product(item))
