"""Shopping list: catalog components at or below zero stock."""

from __future__ import annotations

from collections.abc import Mapping

from pedal_inventory.catalog import Catalog
from pedal_inventory.models import ShoppingList, ShoppingListEntry


def compute_shopping_list(inventory: Mapping[str, int], catalog: Catalog) -> ShoppingList:
    """Return every catalog component with quantity <= 0, in catalog order."""
    entries = [
        ShoppingListEntry(name=c.name, category=c.category, quantity=inventory.get(c.name, 0))
        for c in catalog.all_components()
        if inventory.get(c.name, 0) <= 0
    ]
    return ShoppingList(entries)
