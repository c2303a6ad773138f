"""
Inventory Store - Item records keyed by selection.

A plain container: it does not check prices or quantities. The vending
engine that owns it is responsible for keeping records valid.
"""

from __future__ import annotations

from typing import Mapping, Optional

from core.value_objects import Item, VendingSelection


class InventoryStore:
    """Mapping of selections to their item records."""

    def __init__(self, items: Optional[Mapping[VendingSelection, Item]] = None) -> None:
        self._items: dict[VendingSelection, Item] = dict(items or {})

    def lookup(self, selection: VendingSelection) -> Optional[Item]:
        """Get the record for a selection, or None if it is not stocked."""
        return self._items.get(selection)

    def update(self, selection: VendingSelection, item: Item) -> None:
        """Insert or replace the record for a selection."""
        self._items[selection] = item

    def snapshot(self) -> dict[VendingSelection, Item]:
        """Get a copy of all records."""
        return dict(self._items)

    def __contains__(self, selection: object) -> bool:
        return selection in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"InventoryStore({len(self._items)} items)"
