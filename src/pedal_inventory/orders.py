"""Order engine: apply template build orders to the inventory.

Placing an order adds ``per_unit * qty`` of every template component to the
inventory. Stock is never subtracted; an order models receiving the parts for
``qty`` more pedals.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pedal_inventory.config.logging import get_logger
from pedal_inventory.models import OrderResult, Template
from pedal_inventory.quantities import normalize_order_quantity

logger = get_logger(__name__)


def apply_order(
    inventory: Mapping[str, int],
    templates: Sequence[Template],
    order_request: Mapping[int, Any],
) -> OrderResult:
    """Apply an order request and return the updated inventory.

    Args:
        inventory: Current stock. Not modified.
        templates: Registry in display order.
        order_request: Template index -> build quantity. Missing, zero,
            negative or non-numeric quantities are skipped, as are indices
            with no matching template.

    Returns:
        OrderResult with ``placed=False`` and the original inventory when no
        template had a positive quantity.
    """
    working = dict(inventory)
    applied: list[str] = []
    for idx, template in enumerate(templates):
        qty = normalize_order_quantity(order_request.get(idx))
        if qty <= 0:
            continue
        for comp, per_unit in template.components.items():
            working[comp] = working.get(comp, 0) + per_unit * qty
        applied.append(f"{qty}x {template.name}")

    if not applied:
        logger.debug("Order request had no positive quantities")
        return OrderResult(inventory=dict(inventory), applied=[], placed=False)

    logger.info("Order placed: %s", ", ".join(applied))
    return OrderResult(inventory=working, applied=applied, placed=True)
