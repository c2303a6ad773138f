"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces (Protocols)
- Value Objects
"""

from .exceptions import (
    VendingSystemError,
    InventoryError,
    InvalidResourceError,
    ConversionFailureError,
    UnknownSelectionError,
    VendingError,
    InvalidSelectionError,
    OutOfStockError,
    InsufficientFundsError,
    PreconditionError,
    InvalidAmountError,
    InvalidQuantityError,
    BalanceLimitError,
)
from .interfaces import (
    VendingItem,
    VendingMachine,
)
from .value_objects import (
    Item,
    Money,
    VendResult,
    VendingSelection,
)


__all__ = [
    # Exceptions
    "VendingSystemError",
    "InventoryError",
    "InvalidResourceError",
    "ConversionFailureError",
    "UnknownSelectionError",
    "VendingError",
    "InvalidSelectionError",
    "OutOfStockError",
    "InsufficientFundsError",
    "PreconditionError",
    "InvalidAmountError",
    "InvalidQuantityError",
    "BalanceLimitError",
    # Interfaces
    "VendingItem",
    "VendingMachine",
    # Value Objects
    "Item",
    "Money",
    "VendResult",
    "VendingSelection",
]
