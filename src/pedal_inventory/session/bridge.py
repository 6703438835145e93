"""Thin facade delegating to the session services."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .bridge_types import bridge_ok
from .services import InventoryService, OrderService, ShoppingListService, TemplateService
from .state import SessionState


class InventoryBridge:
    """Single entry point for a presentation layer."""

    def __init__(self, state: SessionState):
        if not state.loaded:
            state.hydrate()
        self._state = state
        self._inventory = InventoryService(state)
        self._templates = TemplateService(state)
        self._orders = OrderService(state)
        self._shopping = ShoppingListService(state)

    @property
    def state(self) -> SessionState:
        return self._state

    # ===========================================================================
    # Catalog
    # ===========================================================================
    def get_catalog(self) -> dict:
        """Return the catalog as category -> component names."""
        return bridge_ok({"categories": self._state.catalog.categories})

    # ===========================================================================
    # Inventory
    # ===========================================================================
    def get_inventory(self) -> dict:
        return self._inventory.get_inventory()

    def set_manual(self, values: Mapping[str, Any]) -> dict:
        return self._inventory.set_manual(values)

    def set_quantity(self, name: str, quantity: Any) -> dict:
        return self._inventory.set_quantity(name, quantity)

    # ===========================================================================
    # Templates
    # ===========================================================================
    def get_templates(self) -> dict:
        return self._templates.get_templates()

    def get_template(self, index: int) -> dict:
        return self._templates.get_template(index)

    def add_template(self, name: str, components: Mapping[str, Any] | None = None) -> dict:
        return self._templates.add_template(name, components)

    # ===========================================================================
    # Orders / Shopping list
    # ===========================================================================
    def place_order(self, request: Mapping[Any, Any]) -> dict:
        return self._orders.place_order(request)

    def get_shopping_list(self) -> dict:
        return self._shopping.get_shopping_list()

    def close(self) -> None:
        """Flush pending saves and stop the persistence worker."""
        self._state.close()
