"""Session state: the single authoritative in-memory copy.

Inventory and templates are held here and replaced wholesale. Every
replacement schedules a best-effort save of the new snapshot; the in-memory
copy stays authoritative whether or not the save succeeds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pedal_inventory.catalog import Catalog, load_catalog
from pedal_inventory.config.logging import get_logger
from pedal_inventory.constants import INVENTORY_KEY, TEMPLATES_KEY
from pedal_inventory.inventory import load_inventory, save_inventory
from pedal_inventory.models import Template
from pedal_inventory.session.persister import Persister
from pedal_inventory.storage import JsonFileStore, KeyValueStore
from pedal_inventory.templates import load_templates, save_templates

if TYPE_CHECKING:
    from pedal_inventory.config.settings import Settings

logger = get_logger(__name__)


@dataclass
class SessionState:
    """Shared state across session services."""

    catalog: Catalog
    store: KeyValueStore
    persister: Persister = field(default_factory=lambda: Persister(background=False))
    inventory: dict[str, int] = field(default_factory=dict)
    templates: list[Template] = field(default_factory=list)
    inventory_key: str = INVENTORY_KEY
    templates_key: str = TEMPLATES_KEY
    loaded: bool = False

    @classmethod
    def from_settings(
        cls, settings: "Settings", store: KeyValueStore | None = None
    ) -> "SessionState":
        """Build a session from settings. Uses the file store unless one is given."""
        return cls(
            catalog=load_catalog(settings.catalog_path),
            store=store if store is not None else JsonFileStore(settings.data_dir),
            persister=Persister(background=settings.async_persistence),
            inventory_key=settings.inventory_key,
            templates_key=settings.templates_key,
        )

    def hydrate(self) -> "SessionState":
        """Load both snapshots from storage. Never raises."""
        self.inventory = load_inventory(self.store, self.catalog, self.inventory_key)
        self.templates = load_templates(self.store, self.templates_key)
        self.loaded = True
        logger.debug(
            "Session hydrated: %d inventory entries, %d templates",
            len(self.inventory),
            len(self.templates),
        )
        return self

    def replace_inventory(self, inventory: dict[str, int]) -> None:
        """Swap in a new inventory and persist it."""
        self.inventory = dict(inventory)
        self.persister.submit(save_inventory, self.store, dict(self.inventory), self.inventory_key)

    def replace_templates(self, templates: list[Template]) -> None:
        """Swap in a new template registry and persist it."""
        self.templates = list(templates)
        self.persister.submit(save_templates, self.store, list(self.templates), self.templates_key)

    def flush(self) -> None:
        """Wait for pending saves."""
        self.persister.flush()

    def close(self) -> None:
        self.persister.close()
