"""Inventory viewing and manual updates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pedal_inventory.config.logging import get_logger
from pedal_inventory.constants import MSG_INVENTORY_UPDATED
from pedal_inventory.inventory import set_manual
from pedal_inventory.quantities import sanitize_quantity

from ..bridge_types import bridge_error, bridge_ok
from ..state import SessionState

logger = get_logger(__name__)


class InventoryService:
    """Read the inventory grouped by category and apply manual edits."""

    def __init__(self, state: SessionState):
        self._state = state

    def get_inventory(self) -> dict:
        """Get stock per component, grouped by catalog category."""
        inv = self._state.inventory
        categories = []
        for category, names in self._state.catalog.categories.items():
            rows = []
            for name in names:
                qty = inv.get(name, 0)
                rows.append({"name": name, "quantity": qty, "low": qty <= 0})
            categories.append({"name": category, "components": rows})
        return bridge_ok({"categories": categories})

    def set_manual(self, values: Mapping[str, Any]) -> dict:
        """Replace the whole inventory with user-entered values."""
        try:
            new_inv = set_manual(values, self._state.catalog)
            self._state.replace_inventory(new_inv)
            logger.info("Inventory replaced manually (%d entries)", len(new_inv))
            return bridge_ok({"inventory": new_inv, "message": MSG_INVENTORY_UPDATED})
        except Exception as e:
            return bridge_error(str(e))

    def set_quantity(self, name: str, quantity: Any) -> dict:
        """Set the stock of a single catalog component."""
        if name not in self._state.catalog:
            return bridge_error(f"Unknown component '{name}'")
        new_inv = dict(self._state.inventory)
        new_inv[name] = sanitize_quantity(quantity)
        self._state.replace_inventory(new_inv)
        return bridge_ok({"name": name, "quantity": new_inv[name]})
