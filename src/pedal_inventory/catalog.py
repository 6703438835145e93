"""Component catalog.

The catalog is fixed configuration: an ordered mapping of category name to
ordered component names. Several derivations (shopping list, inventory
display, template forms) depend on its category-then-item order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path

import yaml

from pedal_inventory.config.logging import get_logger
from pedal_inventory.exceptions import CatalogError
from pedal_inventory.models import ComponentItem

logger = get_logger(__name__)

DEFAULT_CATALOG_RESOURCE = "default_catalog.yaml"


@dataclass(frozen=True)
class Catalog:
    """Static reference data: category -> ordered component names."""

    categories: dict[str, list[str]] = field(default_factory=dict)

    def all_components(self) -> list[ComponentItem]:
        """Flatten the catalog in category-then-item order."""
        return [
            ComponentItem(name=name, category=category)
            for category, names in self.categories.items()
            for name in names
        ]

    def component_names(self) -> list[str]:
        return [c.name for c in self.all_components()]

    def category_of(self, name: str) -> str | None:
        """Return the first category listing ``name``, if any."""
        for category, names in self.categories.items():
            if name in names:
                return category
        return None

    def __contains__(self, name: object) -> bool:
        return any(name in names for names in self.categories.values())

    def default_inventory(self) -> dict[str, int]:
        """All-zero inventory with one entry per catalog component."""
        return {name: 0 for name in self.component_names()}

    def blank_components(self) -> dict[str, int]:
        """All-zero component map used as the starting point of a template."""
        return self.default_inventory()

    @classmethod
    def from_mapping(cls, data: object, source: str = "<mapping>") -> "Catalog":
        """Build a catalog from parsed YAML/JSON data.

        Raises:
            CatalogError: If the data is not a mapping of category -> list of names.
        """
        if not isinstance(data, dict):
            raise CatalogError("Catalog must be a mapping of category to components", source)
        categories: dict[str, list[str]] = {}
        for category, names in data.items():
            if not isinstance(names, list):
                raise CatalogError(
                    f"Category '{category}' must list component names", source
                )
            categories[str(category)] = [str(n) for n in names]
        return cls(categories=categories)


def load_catalog(path: Path | None = None) -> Catalog:
    """Load a catalog from a YAML file, or the bundled one when ``path`` is None.

    Raises:
        CatalogError: If the file cannot be read or is malformed.
    """
    try:
        if path is None:
            text = (
                resources.files("pedal_inventory.data")
                .joinpath(DEFAULT_CATALOG_RESOURCE)
                .read_text(encoding="utf-8")
            )
            source = DEFAULT_CATALOG_RESOURCE
        else:
            text = path.read_text(encoding="utf-8")
            source = str(path)
    except OSError as e:
        raise CatalogError("Could not read catalog file", str(e)) from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogError("Invalid YAML in catalog file", str(e)) from e
    catalog = Catalog.from_mapping(data, source)
    logger.debug(
        "Loaded catalog from %s with %d categories, %d components",
        source,
        len(catalog.categories),
        len(catalog.all_components()),
    )
    return catalog
