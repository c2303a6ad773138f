"""
Infrastructure layer - External resources and configuration.

Contains:
- Inventory resource loading
- Configuration
"""

from .inventory_loader import (
    RESOURCE_DIR,
    dictionary_from_file,
    load_inventory,
    vending_inventory,
)
from .settings import (
    Settings,
    get_settings,
)


__all__ = [
    # Inventory loading
    "RESOURCE_DIR",
    "dictionary_from_file",
    "load_inventory",
    "vending_inventory",
    # Settings
    "Settings",
    "get_settings",
]
