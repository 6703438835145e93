"""Guitar pedal component inventory, build templates and orders."""

from pedal_inventory.catalog import Catalog, load_catalog
from pedal_inventory.inventory import load_inventory, save_inventory, set_manual
from pedal_inventory.models import (
    ComponentItem,
    OrderResult,
    ShoppingList,
    ShoppingListEntry,
    Template,
)
from pedal_inventory.orders import apply_order
from pedal_inventory.shopping import compute_shopping_list
from pedal_inventory.templates import add_template, load_templates, save_templates

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "ComponentItem",
    "OrderResult",
    "ShoppingList",
    "ShoppingListEntry",
    "Template",
    "add_template",
    "apply_order",
    "compute_shopping_list",
    "load_catalog",
    "load_inventory",
    "load_templates",
    "save_inventory",
    "save_templates",
    "set_manual",
]
