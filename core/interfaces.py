"""
Interfaces (Protocols) for the vending machine.

Defines contracts for items and machines using Python's Protocol
for structural subtyping (duck typing with type hints).
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from .value_objects import Item, Money, MoneyLike, VendResult, VendingSelection


@runtime_checkable
class VendingItem(Protocol):
    """Protocol for anything that has a price and a stock count."""

    @property
    def price(self) -> Money:
        """Price of a single item."""
        ...

    @property
    def quantity(self) -> int:
        """Number of items left."""
        ...


@runtime_checkable
class VendingMachine(Protocol):
    """Protocol for a machine that sells items against a deposited balance."""

    @property
    def selection(self) -> tuple[VendingSelection, ...]:
        """Selections offered by the machine, in display order."""
        ...

    @property
    def amount_deposited(self) -> Money:
        """Current deposited balance."""
        ...

    @property
    def inventory(self) -> Mapping[VendingSelection, Item]:
        """Read-only view of the current inventory."""
        ...

    def deposit(self, amount: MoneyLike) -> Money:
        """
        Add funds to the deposited balance.

        Returns:
            The new balance.
        """
        ...

    def vend(self, selection: VendingSelection, quantity: int) -> VendResult:
        """
        Sell ``quantity`` items of ``selection``.

        Raises:
            VendingError: If the purchase cannot be fulfilled.
        """
        ...

    def item(self, selection: VendingSelection) -> Optional[Item]:
        """Get the record for a selection, if stocked."""
        ...
