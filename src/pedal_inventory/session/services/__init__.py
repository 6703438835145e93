"""Session services returning bridge-style response dicts."""

from .inventory_service import InventoryService
from .order_service import OrderService
from .shopping_service import ShoppingListService
from .template_service import TemplateService

__all__ = ["InventoryService", "OrderService", "ShoppingListService", "TemplateService"]
