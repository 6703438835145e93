"""Template registry: the ordered list of pedal build templates.

Order matters: a template's position is the index used in order requests.
The registry is never edited in place; adding returns a new list.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pedal_inventory.catalog import Catalog
from pedal_inventory.config.logging import get_logger
from pedal_inventory.constants import MSG_EMPTY_TEMPLATE_NAME, TEMPLATES_KEY
from pedal_inventory.exceptions import ValidationError
from pedal_inventory.models import Template
from pedal_inventory.quantities import sanitize_quantity
from pedal_inventory.storage.base import KeyValueStore, load_json, save_json

logger = get_logger(__name__)


def load_templates(store: KeyValueStore, key: str = TEMPLATES_KEY) -> list[Template]:
    """Load the registry, falling back to an empty list.

    Entries that do not look like templates are skipped.
    """
    data = load_json(store, key, None)
    if data is None:
        return []
    if not isinstance(data, list):
        logger.warning("Stored templates are not a list (%s), using default", type(data).__name__)
        return []
    templates: list[Template] = []
    for i, raw in enumerate(data):
        try:
            templates.append(_template_from_dict(raw))
        except (PydanticValidationError, TypeError) as e:
            logger.warning("Skipping malformed template at position %d: %s", i, e)
    logger.debug("Loaded %d templates", len(templates))
    return templates


def _template_from_dict(raw: Any) -> Template:
    if not isinstance(raw, dict):
        raise TypeError(f"expected object, got {type(raw).__name__}")
    components = raw.get("components") or {}
    if not isinstance(components, dict):
        raise TypeError("components must be an object")
    return Template(
        name=str(raw.get("name", "")),
        components={str(n): sanitize_quantity(q) for n, q in components.items()},
    )


def save_templates(
    store: KeyValueStore, templates: Sequence[Template], key: str = TEMPLATES_KEY
) -> bool:
    """Write the full registry. Best-effort; returns False on failure."""
    return save_json(store, key, [t.model_dump() for t in templates])


def add_template(
    templates: Sequence[Template],
    name: str,
    components: Mapping[str, Any],
    catalog: Catalog | None = None,
) -> list[Template]:
    """Return a new registry with a template appended.

    The name is trimmed; components are kept including zero quantities. When
    a catalog is given, components it lists but ``components`` omits are
    added with quantity 0, so the template has one entry per catalog component.

    Raises:
        ValidationError: If the trimmed name is empty. ``templates`` is untouched.
    """
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValidationError(MSG_EMPTY_TEMPLATE_NAME)
    merged: dict[str, int] = catalog.blank_components() if catalog is not None else {}
    for comp, qty in components.items():
        merged[str(comp)] = sanitize_quantity(qty)
    template = Template(name=trimmed, components=merged)
    logger.info("Added template %s with %d parts", template.name, template.part_count)
    return [*templates, template]
