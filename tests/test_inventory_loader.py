"""
Unit tests for inventory resource loading.
"""

import json
import plistlib

import pytest

from core.exceptions import (
    ConversionFailureError,
    InvalidResourceError,
    UnknownSelectionError,
    VendingError,
)
from core.value_objects import Item, Money, VendingSelection
from infrastructure.inventory_loader import (
    RESOURCE_DIR,
    dictionary_from_file,
    item_from_entry,
    load_inventory,
    vending_inventory,
)


@pytest.fixture
def write_plist(tmp_path):
    """Write a property list into a temporary resource directory."""
    def _write(name, payload):
        with (tmp_path / f"{name}.plist").open("wb") as fp:
            plistlib.dump(payload, fp)
        return tmp_path
    return _write


# =============================================================================
# Resource File Tests
# =============================================================================


class TestDictionaryFromFile:
    """Tests for reading resource files."""

    def test_missing_resource(self, tmp_path):
        """Test a missing file raises InvalidResourceError."""
        with pytest.raises(InvalidResourceError) as exc_info:
            dictionary_from_file("Missing", "plist", tmp_path)
        assert exc_info.value.code == "invalid_resource"

    def test_unsupported_type(self, tmp_path):
        """Test an unknown resource type raises InvalidResourceError."""
        (tmp_path / "Inventory.csv").write_text("soda,1.5,3")
        with pytest.raises(InvalidResourceError):
            dictionary_from_file("Inventory", "csv", tmp_path)

    def test_array_top_level(self, write_plist):
        """Test a plist holding an array raises ConversionFailureError."""
        resource_dir = write_plist("Inventory", [{"price": 1.5, "quantity": 3}])
        with pytest.raises(ConversionFailureError) as exc_info:
            dictionary_from_file("Inventory", "plist", resource_dir)
        assert exc_info.value.code == "conversion_failure"

    def test_unparseable_plist(self, tmp_path):
        """Test garbage content raises ConversionFailureError."""
        (tmp_path / "Inventory.plist").write_text("<plist><dict><key>soda")
        with pytest.raises(ConversionFailureError):
            dictionary_from_file("Inventory", "plist", tmp_path)

    def test_unparseable_json(self, tmp_path):
        """Test invalid JSON raises ConversionFailureError."""
        (tmp_path / "Inventory.json").write_text("{not json")
        with pytest.raises(ConversionFailureError):
            dictionary_from_file("Inventory", "json", tmp_path)

    def test_reads_json(self, tmp_path):
        """Test JSON resources are supported."""
        payload = {"soda": {"price": 1.5, "quantity": 3}}
        (tmp_path / "Inventory.json").write_text(json.dumps(payload))
        assert dictionary_from_file("Inventory", "json", tmp_path) == payload


# =============================================================================
# Inventory Conversion Tests
# =============================================================================


class TestVendingInventory:
    """Tests for turning resource dictionaries into inventories."""

    def test_converts_entries(self):
        """Test well-formed entries become item records."""
        inventory = vending_inventory({
            "soda": {"price": 1.5, "quantity": 3},
            "candyBar": {"price": 1, "quantity": 0},
        })
        assert inventory == {
            VendingSelection.SODA: Item(price=Money(cents=150), quantity=3),
            VendingSelection.CANDY_BAR: Item(price=Money(cents=100), quantity=0),
        }

    def test_unknown_key(self):
        """Test an unknown selection raises UnknownSelectionError."""
        with pytest.raises(UnknownSelectionError) as exc_info:
            vending_inventory({"pizza": {"price": 5.0, "quantity": 2}})

        assert exc_info.value.key == "pizza"
        assert exc_info.value.code == "invalid_selection"
        assert not isinstance(exc_info.value, VendingError)

    def test_malformed_entries_are_skipped(self, caplog):
        """Test entries without a usable price and quantity are skipped."""
        inventory = vending_inventory({
            "soda": {"price": 1.5, "quantity": 3},
            "chips": {"price": "cheap", "quantity": 3},
            "gum": {"quantity": 3},
            "water": "free",
            "pizza": {"price": 5.0},
        })
        assert list(inventory) == [VendingSelection.SODA]
        assert "Skipping inventory entry" in caplog.text

    @pytest.mark.parametrize("entry", [
        {"price": -1.0, "quantity": 3},
        {"price": 1.0, "quantity": -3},
        {"price": 1.0, "quantity": 2.5},
        {"price": True, "quantity": 3},
        {"price": 1e30, "quantity": 1},
        {"price": 1.0, "quantity": False},
        [1.0, 3],
    ])
    def test_item_from_entry_rejects(self, entry):
        """Test invalid entries yield no record."""
        assert item_from_entry(entry) is None


# =============================================================================
# Bundled Resource Tests
# =============================================================================


class TestLoadInventory:
    """Tests for loading complete inventories."""

    def test_bundled_inventory(self):
        """Test the bundled resource stocks every selection."""
        inventory = load_inventory("VendingInventory", "plist")
        assert (RESOURCE_DIR / "VendingInventory.plist").is_file()
        assert set(inventory) == set(VendingSelection)
        assert inventory[VendingSelection.SODA] == Item(price=Money(cents=125), quantity=10)

    def test_load_from_directory(self, write_plist):
        """Test loading a resource from a custom directory."""
        resource_dir = write_plist("Custom", {"water": {"price": 12.0, "quantity": 5}})
        inventory = load_inventory("Custom", "plist", resource_dir)
        assert inventory == {VendingSelection.WATER: Item(price=Money(cents=1200), quantity=5)}

    def test_out_of_range_price_is_skipped(self, write_plist):
        """Test a price too large to convert does not abort loading."""
        resource_dir = write_plist("Huge", {
            "soda": {"price": 1e30, "quantity": 1},
            "gum": {"price": 0.75, "quantity": 5},
        })
        inventory = load_inventory("Huge", "plist", resource_dir)
        assert inventory == {VendingSelection.GUM: Item(price=Money(cents=75), quantity=5)}
