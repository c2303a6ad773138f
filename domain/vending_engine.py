"""
Vending Engine - Purchase protocol over an owned inventory and balance.

A vend resolves the selection, checks stock, prices the request, checks
funds and then commits. Checks run in that order and any failure leaves
both the inventory and the balance untouched.
"""

from __future__ import annotations

from decimal import Decimal
from threading import RLock
from typing import Final, Mapping, Optional

from core.exceptions import (
    BalanceLimitError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidQuantityError,
    InvalidSelectionError,
    OutOfStockError,
)
from core.value_objects import Item, Money, MoneyLike, VendResult, VendingSelection
from domain.inventory_store import InventoryStore
from loggers import logger


DEFAULT_INITIAL_DEPOSIT: Final[Money] = Money.from_units(Decimal("10.0"))


class FoodVendingMachine:
    """
    Food and drink vending machine.

    Owns its inventory and deposited balance. Callers only reach the
    state through ``deposit``, ``vend`` and the read-only accessors.
    """

    SELECTION: Final[tuple[VendingSelection, ...]] = (
        VendingSelection.SODA,
        VendingSelection.DIET_SODA,
        VendingSelection.CHIPS,
        VendingSelection.COOKIE,
        VendingSelection.WRAP,
        VendingSelection.SANDWICH,
        VendingSelection.CANDY_BAR,
        VendingSelection.POP_TART,
        VendingSelection.WATER,
        VendingSelection.FRUIT_JUICE,
        VendingSelection.SPORTS_DRINK,
        VendingSelection.GUM,
    )

    def __init__(
        self,
        inventory: Mapping[VendingSelection, Item],
        initial_deposit: MoneyLike = DEFAULT_INITIAL_DEPOSIT,
        max_balance: Optional[MoneyLike] = None,
    ) -> None:
        """
        Initialize the machine.

        Args:
            inventory: Item records to stock the machine with. The mapping
                is copied.
            initial_deposit: Balance the machine starts with.
            max_balance: Upper bound for the balance, or None for no bound.
        """
        self._store = InventoryStore(inventory)
        self._amount_deposited = Money.from_units(initial_deposit)
        self._max_balance = Money.from_units(max_balance) if max_balance is not None else None
        self._lock = RLock()

    # =========================================================================
    # Read-only accessors
    # =========================================================================

    @property
    def selection(self) -> tuple[VendingSelection, ...]:
        """Selections offered by this machine, in display order."""
        return self.SELECTION

    @property
    def amount_deposited(self) -> Money:
        """Current deposited balance."""
        with self._lock:
            return self._amount_deposited

    @property
    def max_balance(self) -> Optional[Money]:
        """Upper bound for the balance, or None if unbounded."""
        return self._max_balance

    @property
    def inventory(self) -> dict[VendingSelection, Item]:
        """Copy of the current inventory."""
        with self._lock:
            return self._store.snapshot()

    def item(self, selection: VendingSelection) -> Optional[Item]:
        """Get the record for a selection, if stocked."""
        with self._lock:
            return self._store.lookup(selection)

    # =========================================================================
    # Operations
    # =========================================================================

    def deposit(self, amount: MoneyLike) -> Money:
        """
        Add funds to the deposited balance.

        Args:
            amount: Positive amount, as Money or in currency units.

        Returns:
            The new balance.

        Raises:
            InvalidAmountError: If the amount is not a positive number.
            BalanceLimitError: If the new balance would exceed ``max_balance``.
        """
        money = self._to_deposit_amount(amount)

        with self._lock:
            new_balance = self._amount_deposited + money
            if self._max_balance is not None and new_balance > self._max_balance:
                logger.warning(
                    f"Deposit of {money} rejected: balance would be {new_balance}, "
                    f"limit is {self._max_balance}"
                )
                raise BalanceLimitError(
                    f"Balance cannot exceed {self._max_balance}",
                    details={"limit": str(self._max_balance), "balance": str(self._amount_deposited)},
                )
            self._amount_deposited = new_balance

        logger.info(f"Deposited {money}. Balance: {new_balance}")
        return new_balance

    def vend(self, selection: VendingSelection, quantity: int) -> VendResult:
        """
        Sell items against the deposited balance.

        Args:
            selection: What to vend.
            quantity: How many items to vend, at least one.

        Returns:
            VendResult describing the purchase.

        Raises:
            InvalidQuantityError: If quantity is not a positive integer.
            InvalidSelectionError: If the selection is not stocked.
            OutOfStockError: If fewer than ``quantity`` items are left.
            InsufficientFundsError: If the balance does not cover the total
                price. ``required`` holds the shortfall.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityError(
                f"Quantity must be a positive integer, got {quantity!r}",
                details={"quantity": repr(quantity)},
            )

        name = getattr(selection, "value", str(selection))

        with self._lock:
            item = self._store.lookup(selection)
            if item is None:
                logger.warning(f"Vend rejected: {name} is not stocked")
                raise InvalidSelectionError(f"Invalid selection: {name}", selection=name)

            if item.quantity < quantity:
                logger.warning(
                    f"Vend rejected: {quantity} x {name} requested, {item.quantity} left"
                )
                raise OutOfStockError(
                    f"Out of stock: {name}",
                    requested=quantity,
                    available=item.quantity,
                )

            total_price = item.price * quantity

            if self._amount_deposited < total_price:
                required = total_price - self._amount_deposited
                logger.warning(
                    f"Vend rejected: {quantity} x {name} costs {total_price}, "
                    f"balance is {self._amount_deposited}"
                )
                raise InsufficientFundsError(
                    f"Insufficient funds: {required} more required",
                    required=required,
                )

            self._amount_deposited = self._amount_deposited - total_price
            updated = item.with_quantity(item.quantity - quantity)
            self._store.update(selection, updated)

            result = VendResult(
                selection=selection,
                quantity=quantity,
                total_price=total_price,
                remaining_balance=self._amount_deposited,
                remaining_quantity=updated.quantity,
            )

        logger.info(result.message)
        return result

    # =========================================================================
    # Helpers
    # =========================================================================

    @staticmethod
    def _to_deposit_amount(amount: MoneyLike) -> Money:
        try:
            money = Money.from_units(amount)
        except (TypeError, ValueError):
            raise InvalidAmountError(
                f"Invalid deposit amount: {amount!r}",
                details={"amount": repr(amount)},
            ) from None
        if money.cents == 0:
            raise InvalidAmountError(
                f"Deposit amount must be positive, got {amount!r}",
                details={"amount": repr(amount)},
            )
        return money

    def __repr__(self) -> str:
        return (
            f"FoodVendingMachine(items={len(self._store)}, "
            f"amount_deposited={self._amount_deposited!r})"
        )
