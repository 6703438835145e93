"""Centralized constants for pedal-inventory."""

APP_NAME = "pedal-inventory"

# Storage keys for the two persisted snapshots
INVENTORY_KEY = "pedal-inventory"
TEMPLATES_KEY = "pedal-templates"

# User-facing messages
MSG_EMPTY_TEMPLATE_NAME = "Please enter a pedal name."
MSG_NO_ORDERS = "No orders placed — set a quantity first."
MSG_ORDER_PLACED = "Order placed: {lines}"
MSG_INVENTORY_UPDATED = "Inventory updated successfully!"
MSG_TEMPLATE_SAVED = 'Template "{name}" saved!'
MSG_FULLY_STOCKED = "All components are in stock!"
MSG_NO_TEMPLATES = "No pedal templates found. Upload a template first."
