"""Shopping list view."""

from __future__ import annotations

from pedal_inventory.constants import MSG_FULLY_STOCKED
from pedal_inventory.shopping import compute_shopping_list

from ..bridge_types import bridge_ok
from ..state import SessionState


class ShoppingListService:
    def __init__(self, state: SessionState):
        self._state = state

    def get_shopping_list(self) -> dict:
        """Get components at or below zero stock, in catalog order."""
        shopping = compute_shopping_list(self._state.inventory, self._state.catalog)
        return bridge_ok(
            {
                "items": shopping.to_list(),
                "fullyStocked": shopping.fully_stocked,
                "message": MSG_FULLY_STOCKED if shopping.fully_stocked else None,
            }
        )
