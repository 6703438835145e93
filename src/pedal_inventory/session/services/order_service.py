"""Order placement against the session inventory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pedal_inventory.config.logging import get_logger
from pedal_inventory.constants import MSG_NO_TEMPLATES
from pedal_inventory.orders import apply_order

from ..bridge_types import bridge_ok
from ..state import SessionState

logger = get_logger(__name__)


def _coerce_request(request: Mapping[Any, Any]) -> dict[int, Any]:
    """Accept int or digit-only string template indices, dropping anything else."""
    out: dict[int, Any] = {}
    for key, qty in request.items():
        if isinstance(key, int) and not isinstance(key, bool):
            out[key] = qty
        elif isinstance(key, str) and key.strip().isascii() and key.strip().isdigit():
            out[int(key)] = qty
        else:
            logger.debug("Ignoring non-numeric template index %r", key)
    return out


class OrderService:
    """Apply template orders and persist the result."""

    def __init__(self, state: SessionState):
        self._state = state

    def place_order(self, request: Mapping[Any, Any]) -> dict:
        """Place an order.

        The no-op case (no positive quantity) is a success response with
        ``placed`` False; inventory is neither changed nor saved.
        """
        result = apply_order(self._state.inventory, self._state.templates, _coerce_request(request))
        if not result.placed:
            message = MSG_NO_TEMPLATES if not self._state.templates else result.summary()
            return bridge_ok({"placed": False, "applied": [], "message": message})
        self._state.replace_inventory(result.inventory)
        return bridge_ok({"placed": True, "applied": result.applied, "message": result.summary()})
