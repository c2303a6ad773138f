"""
Custom exceptions for the vending machine.

Two disjoint families are defined here: ingestion errors raised while
building an inventory from external data, and vend errors raised when a
purchase cannot be fulfilled. Precondition errors cover caller mistakes
that belong to neither family.
"""

from typing import Any, Optional


class VendingSystemError(Exception):
    """Base exception for all vending machine errors."""

    default_code: str = "vending_error"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Inventory (Ingestion) Errors
# =============================================================================


class InventoryError(VendingSystemError):
    """Base exception for errors while loading an inventory."""

    default_code = "inventory_error"


class InvalidResourceError(InventoryError):
    """The inventory resource could not be located."""

    default_code = "invalid_resource"

    def __init__(self, message: str, resource: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.resource = resource
        if resource:
            self.details["resource"] = resource


class ConversionFailureError(InventoryError):
    """The inventory resource has the wrong shape or cannot be parsed."""

    default_code = "conversion_failure"


class UnknownSelectionError(InventoryError):
    """The inventory resource names an identifier the machine does not know."""

    default_code = "invalid_selection"

    def __init__(self, message: str, key: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.key = key
        if key is not None:
            self.details["key"] = key


# =============================================================================
# Vend Errors
# =============================================================================


class VendingError(VendingSystemError):
    """Base exception for a purchase that cannot be fulfilled."""

    default_code = "vend_error"


class InvalidSelectionError(VendingError):
    """The requested selection is not stocked by this machine."""

    default_code = "invalid_selection"

    def __init__(self, message: str, selection: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.selection = selection
        if selection is not None:
            self.details["selection"] = selection


class OutOfStockError(VendingError):
    """Not enough items left to fulfil the request."""

    default_code = "out_of_stock"

    def __init__(
        self,
        message: str,
        requested: int = 0,
        available: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.details["requested"] = requested
        self.details["available"] = available


class InsufficientFundsError(VendingError):
    """
    Deposited balance does not cover the total price.

    Attributes:
        required: The shortfall, i.e. how much more has to be deposited.
    """

    default_code = "insufficient_funds"

    def __init__(self, message: str, required: Any, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.required = required
        self.details["required"] = str(required)


# =============================================================================
# Precondition Errors
# =============================================================================


class PreconditionError(VendingSystemError):
    """Base exception for invalid arguments passed by a caller."""

    default_code = "precondition_failed"


class InvalidAmountError(PreconditionError):
    """Deposit amount is zero, negative or not a number."""

    default_code = "invalid_amount"


class InvalidQuantityError(PreconditionError):
    """Vend quantity is not a positive integer."""

    default_code = "invalid_quantity"


class BalanceLimitError(PreconditionError):
    """Deposit would push the balance above the configured maximum."""

    default_code = "balance_limit"
