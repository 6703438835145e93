"""Inventory store: component name -> on-hand quantity.

The inventory lives in memory as a plain dict and is persisted as a whole
under a single storage key. Loading never fails; it degrades to the all-zero
inventory built from the catalog.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pedal_inventory.catalog import Catalog
from pedal_inventory.config.logging import get_logger
from pedal_inventory.constants import INVENTORY_KEY
from pedal_inventory.quantities import sanitize_quantity
from pedal_inventory.storage.base import KeyValueStore, load_json, save_json

logger = get_logger(__name__)


def load_inventory(
    store: KeyValueStore, catalog: Catalog, key: str = INVENTORY_KEY
) -> dict[str, int]:
    """Load the inventory snapshot, falling back to all zeros.

    The stored mapping is laid over the catalog default so every catalog
    component has an entry. Unknown names are kept as-is.
    """
    default = catalog.default_inventory()
    data = load_json(store, key, None)
    if data is None:
        return default
    if not isinstance(data, dict):
        logger.warning("Stored inventory is not a mapping (%s), using default", type(data).__name__)
        return default
    inventory = default
    for name, qty in data.items():
        inventory[str(name)] = sanitize_quantity(qty)
    unknown = [n for n in inventory if n not in catalog]
    if unknown:
        logger.debug("Inventory has %d names outside the catalog: %s", len(unknown), unknown)
    return inventory


def save_inventory(
    store: KeyValueStore, inventory: Mapping[str, int], key: str = INVENTORY_KEY
) -> bool:
    """Write the full inventory. Best-effort; returns False on failure."""
    return save_json(store, key, dict(inventory))


def set_manual(new_values: Mapping[str, Any], catalog: Catalog | None = None) -> dict[str, int]:
    """Build a replacement inventory from user-entered values.

    Every value is clamped to a non-negative int before it enters the store.
    With a catalog, components missing from ``new_values`` are set to 0.
    """
    inventory = catalog.default_inventory() if catalog is not None else {}
    for name, qty in new_values.items():
        inventory[str(name)] = sanitize_quantity(qty)
    return inventory
