"""Shoe list controller.

Mediates between the shoe service and the screen host: fetches the list,
refreshes it on focus and on pull-to-refresh, and deletes a shoe after the
user confirms. Remote errors never escape; they become notifications.
"""

from typing import Callable

from shoe_inventory.core.host import (
    DELETE_FAILED,
    DELETE_SUCCEEDED,
    FETCH_FAILED,
    Screen,
    ScreenHost,
    delete_prompt,
)
from shoe_inventory.core.list_state import ShoeListState
from shoe_inventory.infra.logging import get_logger
from shoe_inventory.schemas.product import Product
from shoe_inventory.services.shoe_service import ShoeService, ShoeServiceError

logger = get_logger(__name__)

StateListener = Callable[[ShoeListState], None]


class ShoeListController:
    """State holder and action handler for the shoe list screen."""

    def __init__(
        self,
        service: ShoeService,
        host: ScreenHost,
        state: ShoeListState | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            service: Client for the remote shoe service
            host: Navigation and alerting host
            state: Initial state (defaults to an empty list awaiting first load)
        """
        self.service = service
        self.host = host
        self._state = state or ShoeListState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ShoeListState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new state.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: ShoeListState) -> None:
        if state is self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    async def load(self, refreshing: bool = False) -> bool:
        """Fetch the full shoe list and replace the items on success.

        Args:
            refreshing: True when called from pull-to-refresh

        Returns:
            True if this fetch's items were applied
        """
        self._set_state(self._state.begin_fetch(refreshing=refreshing))
        token = self._state.latest_request
        items: list[Product] | None = None

        try:
            response = await self.service.get_all_shoes()
            if response.ok and response.data is not None:
                items = response.data
            elif self._state.is_current(token):
                logger.warning("Shoe list rejected", status_code=response.status)
                self.host.notify(FETCH_FAILED)
        except ShoeServiceError as e:
            if self._state.is_current(token):
                logger.warning("Failed to load shoes", error=str(e), status_code=e.status_code)
                self.host.notify(FETCH_FAILED)
        finally:
            if not self._state.is_current(token):
                logger.debug("Discarding stale shoe list response", token=token)
            elif items is not None:
                self._set_state(self._state.complete_fetch(token, items))
            else:
                self._set_state(self._state.fail_fetch(token))

        return items is not None and self._state.latest_request == token

    async def refresh(self) -> bool:
        """Pull-to-refresh: raise the refreshing flag and reload."""
        return await self.load(refreshing=True)

    async def on_screen_focus(self) -> bool:
        """Reload every time the screen becomes active."""
        return await self.load()

    async def request_delete(self, shoe_id: int | str, display_name: str) -> bool:
        """Ask for confirmation, then delete the shoe and reload.

        Returns:
            True if the shoe was deleted
        """
        confirmed = await self.host.confirm(delete_prompt(display_name))
        if not confirmed:
            logger.info("Shoe deletion cancelled", shoe_id=shoe_id)
            return False

        try:
            response = await self.service.delete_shoe(shoe_id)
        except ShoeServiceError as e:
            logger.warning("Failed to delete shoe", shoe_id=shoe_id, error=str(e))
            self.host.notify(DELETE_FAILED)
            return False

        if not response.ok:
            logger.warning("Shoe deletion rejected", shoe_id=shoe_id, status_code=response.status)
            self.host.notify(DELETE_FAILED)
            return False

        self.host.notify(DELETE_SUCCEEDED)
        await self.load()
        return True

    def navigate_to_edit(self, item: Product) -> None:
        """Open the edit screen for a shoe."""
        self.host.navigate(Screen.EDIT_SHOE, {"shoe": item})

    def navigate_to_add(self) -> None:
        """Open the add screen."""
        self.host.navigate(Screen.ADD_SHOE)
