"""Template listing and creation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pedal_inventory.constants import MSG_TEMPLATE_SAVED
from pedal_inventory.exceptions import ValidationError
from pedal_inventory.models import Template
from pedal_inventory.templates import add_template

from ..bridge_types import bridge_error, bridge_ok
from ..state import SessionState


def _template_summary(index: int, t: Template) -> dict:
    used = t.used_components()
    return {
        "index": index,
        "name": t.name,
        "parts": len(used),
        "components": [{"name": n, "quantity": q} for n, q in used],
    }


class TemplateService:
    """Template registry operations."""

    def __init__(self, state: SessionState):
        self._state = state

    def get_templates(self) -> dict:
        """Get all templates in registry order."""
        return bridge_ok(
            {"templates": [_template_summary(i, t) for i, t in enumerate(self._state.templates)]}
        )

    def get_template(self, index: int) -> dict:
        """Get one template by its registry index."""
        templates = self._state.templates
        if not 0 <= index < len(templates):
            return bridge_error(f"Template {index} not found")
        return bridge_ok(_template_summary(index, templates[index]))

    def add_template(self, name: str, components: Mapping[str, Any] | None = None) -> dict:
        """Create a template and append it to the registry."""
        try:
            new_templates = add_template(
                self._state.templates, name, components or {}, self._state.catalog
            )
        except ValidationError as e:
            return bridge_error(e.message)
        self._state.replace_templates(new_templates)
        created = new_templates[-1]
        return bridge_ok(
            {
                "index": len(new_templates) - 1,
                "name": created.name,
                "parts": created.part_count,
                "message": MSG_TEMPLATE_SAVED.format(name=created.name),
            }
        )
