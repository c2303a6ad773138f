"""
Domain layer - Business logic and domain models.

Contains:
- Inventory store
- Vending engine
"""

from .inventory_store import InventoryStore
from .vending_engine import DEFAULT_INITIAL_DEPOSIT, FoodVendingMachine


__all__ = [
    "InventoryStore",
    "FoodVendingMachine",
    "DEFAULT_INITIAL_DEPOSIT",
]
