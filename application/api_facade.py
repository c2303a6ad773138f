"""
API Facade - Unified interface for the vending machine.

Accepts plain strings and numbers from a caller (command transport, CLI,
tests), drives the vending engine, and answers with response dictionaries.
"""

from __future__ import annotations

from typing import Any, Optional

from core.exceptions import InvalidSelectionError, VendingSystemError
from core.interfaces import VendingMachine
from core.value_objects import VendingSelection
from domain.vending_engine import FoodVendingMachine
from infrastructure.inventory_loader import load_inventory
from infrastructure.settings import Settings, get_settings
from loggers import logger


def parse_selection(key: Any) -> VendingSelection:
    """
    Resolve a selection key such as ``"candyBar"``.

    Raises:
        InvalidSelectionError: If the key is not a known selection.
    """
    if isinstance(key, VendingSelection):
        return key
    try:
        return VendingSelection(key)
    except ValueError:
        raise InvalidSelectionError(f"Invalid selection: {key}", selection=str(key)) from None


def error_response(error: VendingSystemError) -> dict[str, Any]:
    """Build an unsuccessful response from an error."""
    return {
        "success": False,
        "message": error.message,
        "data": error.to_dict(),
    }


class VendingMachineFacade:
    """
    Facade for the vending machine API.

    Every method returns a dictionary with ``success``, ``message`` and
    ``data`` keys. Expected failures are reported in the response rather
    than raised.
    """

    def __init__(self, machine: VendingMachine) -> None:
        """
        Initialize the facade.

        Args:
            machine: The vending machine to drive.
        """
        self._machine = machine

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "VendingMachineFacade":
        """
        Build a facade around a machine stocked from the configured resource.

        Raises:
            InventoryError: If the inventory resource cannot be loaded.
        """
        settings = settings or get_settings()
        vending = settings.vending

        inventory = load_inventory(
            vending.inventory_resource,
            vending.inventory_type,
            vending.resource_dir,
        )
        machine = FoodVendingMachine(
            inventory,
            initial_deposit=vending.initial_deposit,
            max_balance=vending.max_balance,
        )
        return cls(machine)

    @property
    def machine(self) -> VendingMachine:
        return self._machine

    # =========================================================================
    # Operations
    # =========================================================================

    async def deposit(self, amount: Any) -> dict[str, Any]:
        """
        Add funds to the deposited balance.

        Args:
            amount: Amount in currency units, e.g. ``"1.50"``.
        """
        try:
            balance = self._machine.deposit(amount)
        except VendingSystemError as e:
            return error_response(e)

        return {
            "success": True,
            "message": f"Deposited. Balance: {balance}",
            "data": {"amount_deposited": str(balance)},
        }

    async def vend(self, selection: Any, quantity: Any) -> dict[str, Any]:
        """
        Vend items.

        Args:
            selection: Selection key, e.g. ``"soda"``.
            quantity: Number of items.
        """
        try:
            result = self._machine.vend(parse_selection(selection), quantity)
        except VendingSystemError as e:
            return error_response(e)

        return {
            "success": True,
            "message": result.message,
            "data": result.to_dict(),
        }

    async def item(self, selection: Any) -> dict[str, Any]:
        """Get price and stock for a selection."""
        try:
            parsed = parse_selection(selection)
        except VendingSystemError as e:
            return error_response(e)

        record = self._machine.item(parsed)
        if record is None:
            return {
                "success": True,
                "message": f"{parsed.value} is not stocked",
                "data": {"selection": parsed.value, "item": None},
            }

        return {
            "success": True,
            "message": f"{parsed.value}: {record.quantity} left at {record.price}",
            "data": {"selection": parsed.value, "item": record.to_dict()},
        }

    async def selection_list(self) -> dict[str, Any]:
        """Get the selections offered, in display order."""
        return {
            "success": True,
            "message": None,
            "data": [selection.value for selection in self._machine.selection],
        }

    async def status(self) -> dict[str, Any]:
        """Get the deposited balance and the full inventory."""
        inventory = self._machine.inventory
        logger.debug(f"Status requested: {len(inventory)} items stocked")
        return {
            "success": True,
            "message": None,
            "data": {
                "amount_deposited": str(self._machine.amount_deposited),
                "inventory": {
                    selection.value: inventory[selection].to_dict()
                    for selection in self._machine.selection
                    if selection in inventory
                },
            },
        }
