"""View state of the shoe list screen."""

from dataclasses import dataclass, replace
from typing import Sequence

from shoe_inventory.schemas.product import Product


@dataclass(frozen=True)
class ShoeListState:
    """Immutable state of the shoe list.

    Each transition returns a new state; the original is never mutated.
    Every fetch takes a token from ``latest_request``. Only the completion
    of the most recently started fetch is applied, so overlapping fetches
    (pull-to-refresh racing a focus reload) resolve to the newest request
    rather than whichever response arrives last.
    """

    items: tuple[Product, ...] = ()
    loading: bool = True
    refreshing: bool = False
    latest_request: int = 0

    def is_current(self, token: int) -> bool:
        """Whether a fetch token belongs to the most recent fetch."""
        return token == self.latest_request

    def begin_fetch(self, refreshing: bool = False) -> "ShoeListState":
        """Return new state with a fresh fetch token.

        Args:
            refreshing: True when the fetch comes from pull-to-refresh

        Returns:
            New ShoeListState; its latest_request is the token for this fetch
        """
        return replace(
            self,
            refreshing=self.refreshing or refreshing,
            latest_request=self.latest_request + 1,
        )

    def complete_fetch(self, token: int, items: Sequence[Product]) -> "ShoeListState":
        """Return new state holding the fetched items.

        Stale tokens leave the state unchanged.
        """
        if not self.is_current(token):
            return self
        return replace(self, items=tuple(items), loading=False, refreshing=False)

    def fail_fetch(self, token: int) -> "ShoeListState":
        """Return new state with flags cleared and items kept."""
        if not self.is_current(token):
            return self
        return replace(self, loading=False, refreshing=False)

    def find(self, shoe_id: int | str) -> Product | None:
        """Look up an item by id, comparing ids as strings."""
        for item in self.items:
            if str(item.id) == str(shoe_id):
                return item
        return None
