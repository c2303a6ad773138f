"""
Value Objects for the vending machine.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.
"""

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Union


# =============================================================================
# Enums
# =============================================================================


class VendingSelection(Enum):
    """
    Product categories a vending machine can offer.

    The value of each member is the key used for it in inventory
    resources and in commands.
    """

    SODA = "soda"
    DIET_SODA = "dietSoda"
    CHIPS = "chips"
    COOKIE = "cookie"
    SANDWICH = "sandwich"
    WRAP = "wrap"
    CANDY_BAR = "candyBar"
    POP_TART = "popTart"
    WATER = "water"
    FRUIT_JUICE = "fruitJuice"
    SPORTS_DRINK = "sportsDrink"
    GUM = "gum"


# =============================================================================
# Money Value Object
# =============================================================================


CENTS_PER_UNIT = 100

MoneyLike = Union["Money", Decimal, int, float, str]


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable value object representing monetary amounts.

    Internally stores amounts in cents (smallest unit) so that prices
    and balances are added and multiplied exactly.

    Attributes:
        cents: Amount in cents.
    """

    cents: int = 0

    def __post_init__(self) -> None:
        """Validate the amount."""
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"cents must be an int, got {type(self.cents).__name__}")
        if self.cents < 0:
            raise ValueError("Amount cannot be negative")

    @classmethod
    def from_units(cls, value: MoneyLike) -> "Money":
        """
        Create Money from an amount in whole currency units.

        Args:
            value: Amount such as ``"1.50"``, ``Decimal("1.5")`` or ``10``.

        Returns:
            Money instance, rounded half-up to the nearest cent.

        Raises:
            ValueError: If the value is not a finite, non-negative number.
        """
        if isinstance(value, Money):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a monetary amount: {value!r}")
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Not a monetary amount: {value!r}") from None
        if not amount.is_finite():
            raise ValueError(f"Not a monetary amount: {value!r}")
        try:
            cents = (amount * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValueError(f"Amount out of range: {value!r}") from None
        return cls(cents=int(cents))

    @property
    def units(self) -> Decimal:
        """Get amount in whole currency units."""
        return Decimal(self.cents).scaleb(-2)

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=max(0, self.cents - other.cents))

    def __mul__(self, factor: int) -> "Money":
        """Multiply by a whole number of items."""
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Money(cents=self.cents * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        """String representation in units."""
        return f"{self.units:.2f}"

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"Money(cents={self.cents})"


# =============================================================================
# Item Record
# =============================================================================


@dataclass(frozen=True)
class Item:
    """
    Price and remaining stock for one selection.

    Attributes:
        price: Price of a single item.
        quantity: Number of items left.
    """

    price: Money
    quantity: int

    def with_quantity(self, quantity: int) -> "Item":
        """Return a copy of this record with a different quantity."""
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "price": str(self.price),
            "quantity": self.quantity,
        }


# =============================================================================
# Vend Result Value Object
# =============================================================================


@dataclass(frozen=True)
class VendResult:
    """
    Result of a successful vend.

    Attributes:
        selection: What was vended.
        quantity: How many items were vended.
        total_price: Amount charged.
        remaining_balance: Deposited balance left after the purchase.
        remaining_quantity: Stock left for the selection.
    """

    selection: VendingSelection
    quantity: int
    total_price: Money
    remaining_balance: Money
    remaining_quantity: int

    @property
    def message(self) -> str:
        """Human-readable message."""
        return (
            f"Vended {self.quantity} x {self.selection.value} for {self.total_price}. "
            f"Balance: {self.remaining_balance}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "selection": self.selection.value,
            "quantity": self.quantity,
            "total_price": str(self.total_price),
            "remaining_balance": str(self.remaining_balance),
            "remaining_quantity": self.remaining_quantity,
        }
