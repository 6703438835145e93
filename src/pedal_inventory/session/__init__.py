"""Session controller: in-memory state plus services."""

from pedal_inventory.session.bridge import InventoryBridge
from pedal_inventory.session.persister import Persister
from pedal_inventory.session.state import SessionState

__all__ = ["InventoryBridge", "Persister", "SessionState"]
