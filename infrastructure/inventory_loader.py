"""
Inventory loader - Builds an inventory from a bundled resource file.

Resources are property lists or JSON documents keyed by selection name,
each entry holding a ``price`` and a ``quantity``:

    {"soda": {"price": 1.25, "quantity": 10}, ...}
"""

from __future__ import annotations

import json
import plistlib
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Final, Mapping, Optional
from xml.parsers.expat import ExpatError

from core.exceptions import ConversionFailureError, InvalidResourceError, UnknownSelectionError
from core.value_objects import Item, Money, VendingSelection
from loggers import logger


RESOURCE_DIR: Final[Path] = Path(__file__).resolve().parent / "resources"

PARSERS: Final[dict[str, Callable[[Any], Any]]] = {
    "plist": plistlib.load,
    "json": json.load,
}


def resource_path(name: str, file_type: str, resource_dir: Optional[Path] = None) -> Path:
    """Get the path of a resource in the resource directory."""
    return Path(resource_dir or RESOURCE_DIR) / f"{name}.{file_type}"


def dictionary_from_file(
    name: str,
    file_type: str,
    resource_dir: Optional[Path] = None,
) -> dict[str, Any]:
    """
    Read a resource file into a dictionary.

    Args:
        name: Resource name without extension.
        file_type: Resource type, ``plist`` or ``json``.
        resource_dir: Directory to look in. Defaults to the bundled resources.

    Returns:
        The top-level mapping of the resource.

    Raises:
        InvalidResourceError: If the resource does not exist or its type is
            not supported.
        ConversionFailureError: If the resource cannot be parsed or its top
            level is not a mapping.
    """
    path = resource_path(name, file_type, resource_dir)

    parser = PARSERS.get(file_type.lower())
    if parser is None:
        raise InvalidResourceError(f"Unsupported resource type: {file_type}", resource=str(path))

    if not path.is_file():
        raise InvalidResourceError(f"Resource not found: {path}", resource=str(path))

    try:
        with path.open("rb") as fp:
            data = parser(fp)
    except OSError as e:
        raise InvalidResourceError(f"Cannot read resource {path}: {e}", resource=str(path)) from e
    except (ValueError, ExpatError) as e:
        raise ConversionFailureError(f"Cannot parse resource {path}: {e}") from e

    # Property lists and JSON documents may have an array at the top level
    if not isinstance(data, dict) or not all(isinstance(key, str) for key in data):
        raise ConversionFailureError(
            f"Resource {path} must contain a mapping, got {type(data).__name__}",
        )

    return data


def item_from_entry(entry: Any) -> Optional[Item]:
    """
    Convert a resource entry into an item record.

    Returns:
        The record, or None if the entry has no usable price and quantity.
    """
    if not isinstance(entry, Mapping):
        return None

    price = entry.get("price")
    quantity = entry.get("quantity")

    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        return None
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
        return None

    try:
        return Item(price=Money.from_units(price), quantity=quantity)
    except ValueError:
        return None


def vending_inventory(dictionary: Mapping[str, Any]) -> dict[VendingSelection, Item]:
    """
    Build an inventory from a resource dictionary.

    Entries without a usable price and quantity are skipped.

    Raises:
        UnknownSelectionError: If a well-formed entry is keyed by a name
            that is not a known selection.
    """
    inventory: dict[VendingSelection, Item] = {}

    for key, entry in dictionary.items():
        item = item_from_entry(entry)
        if item is None:
            logger.warning(f"Skipping inventory entry {key!r}: no valid price and quantity")
            continue

        try:
            selection = VendingSelection(key)
        except ValueError:
            raise UnknownSelectionError(f"Unknown selection in inventory: {key}", key=key) from None

        inventory[selection] = item

    return inventory


def load_inventory(
    name: str,
    file_type: str,
    resource_dir: Optional[Path] = None,
) -> dict[VendingSelection, Item]:
    """
    Load an inventory from a resource file.

    Raises:
        InventoryError: If the resource is missing, malformed, or names an
            unknown selection.
    """
    inventory = vending_inventory(dictionary_from_file(name, file_type, resource_dir))
    logger.info(f"Loaded {len(inventory)} inventory items from {name}.{file_type}")
    return inventory
