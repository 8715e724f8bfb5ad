"""Tests for the item registry."""

import pytest

from stockroom.registry import Item, ItemNotFoundError, ItemRegistry


@pytest.fixture
def registry():
    """Registry with the default Laptop/Mouse seeds."""
    return ItemRegistry()


class TestSeeding:
    """Test registry construction."""

    def test_default_seeds(self, registry):
        """Test that the default seeds get ids 1 and 2."""
        assert registry.list_items() == (
            Item(1, "Laptop", 10, 899.99),
            Item(2, "Mouse", 50, 15.50),
        )
        assert registry.next_id == 3

    def test_empty_seeds(self):
        """Test that an empty seed list gives an empty registry."""
        registry = ItemRegistry(seed_items=[])
        assert registry.list_items() == ()
        assert len(registry) == 0
        assert registry.next_id == 1

    def test_custom_seeds(self):
        """Test that custom seeds are added in order."""
        registry = ItemRegistry(
            seed_items=[{"name": "Desk", "quantity": 2, "unit_price": 120.0}]
        )
        assert registry.list_items() == (Item(1, "Desk", 2, 120.0),)


class TestAdd:
    """Test ItemRegistry.add."""

    def test_first_added_item_gets_id_3(self, registry):
        """Test that ids continue after the seeds."""
        item = registry.add("Keyboard", 5, 29.99)
        assert item == Item(3, "Keyboard", 5, 29.99)
        assert len(registry.list_items()) == 3

    def test_ids_are_sequential(self, registry):
        """Test that each add gets 1 + number of prior adds."""
        ids = [registry.add(f"item-{n}", n, 1.0).id for n in range(5)]
        assert ids == [3, 4, 5, 6, 7]
        assert registry.next_id == 8

    def test_insertion_order(self, registry):
        """Test that list_items keeps insertion order."""
        registry.add("Keyboard", 5, 29.99)
        registry.add("Monitor", 3, 199.0)
        names = [item.name for item in registry.list_items()]
        assert names == ["Laptop", "Mouse", "Keyboard", "Monitor"]

    def test_no_validation(self, registry):
        """Test that empty names and negative values are accepted."""
        item = registry.add("", -4, -1.5)
        assert item.name == ""
        assert item.quantity == -4
        assert item.unit_price == -1.5

    def test_list_is_a_snapshot(self, registry):
        """Test that the returned tuple does not track later adds."""
        before = registry.list_items()
        registry.add("Keyboard", 5, 29.99)
        assert len(before) == 2
        assert len(registry.list_items()) == 3


class TestFindById:
    """Test ItemRegistry.find_by_id."""

    def test_found(self, registry):
        """Test lookup of an existing id."""
        assert registry.find_by_id(2).name == "Mouse"

    def test_not_found(self, registry):
        """Test lookup of an unknown id."""
        assert registry.find_by_id(99) is None
        assert registry.find_by_id(0) is None

    def test_deterministic(self, registry):
        """Test that repeated lookups return equal results without side effects."""
        first = registry.find_by_id(1)
        second = registry.find_by_id(1)
        assert first == second
        assert registry.next_id == 3
        assert len(registry) == 2


class TestUpdate:
    """Test ItemRegistry.update."""

    def test_update_existing(self, registry):
        """Test that only quantity and price of the target change."""
        item = registry.update(2, 40, 12.00)
        assert item == Item(2, "Mouse", 40, 12.00)
        assert registry.find_by_id(1) == Item(1, "Laptop", 10, 899.99)

    def test_update_in_place(self, registry):
        """Test that the stored item object is mutated."""
        stored = registry.find_by_id(1)
        registry.update(1, 0, 799.0)
        assert stored.quantity == 0
        assert stored.unit_price == 799.0

    def test_update_not_found(self, registry):
        """Test that an unknown id raises and leaves the registry unchanged."""
        before = [Item(i.id, i.name, i.quantity, i.unit_price) for i in registry.list_items()]

        with pytest.raises(ItemNotFoundError) as exc_info:
            registry.update(99, 1, 1.0)

        assert exc_info.value.item_id == 99
        assert "Item with ID 99 not found." in str(exc_info.value)
        assert list(registry.list_items()) == before
        assert registry.next_id == 3

    def test_not_found_is_value_error(self, registry):
        """Test that ItemNotFoundError can be caught as ValueError."""
        with pytest.raises(ValueError):
            registry.update(42, 1, 1.0)

    def test_update_idempotent(self, registry):
        """Test that applying the same update twice equals applying it once."""
        registry.update(2, 40, 12.00)
        once = registry.list_items()
        snapshot = [(i.id, i.name, i.quantity, i.unit_price) for i in once]

        registry.update(2, 40, 12.00)
        again = [(i.id, i.name, i.quantity, i.unit_price) for i in registry.list_items()]

        assert again == snapshot


class TestScenario:
    """End-to-end registry scenario."""

    def test_keyboard_and_mouse_scenario(self, registry):
        """Test add, update and a failed update on a fresh registry."""
        keyboard = registry.add("Keyboard", 5, 29.99)
        assert keyboard.id == 3
        assert len(registry.list_items()) == 3

        registry.update(2, 40, 12.00)
        assert registry.find_by_id(2) == Item(2, "Mouse", 40, 12.00)

        with pytest.raises(ItemNotFoundError):
            registry.update(99, 1, 1.0)

        assert registry.list_items() == (
            Item(1, "Laptop", 10, 899.99),
            Item(2, "Mouse", 40, 12.00),
            Item(3, "Keyboard", 5, 29.99),
        )


class TestDescribe:
    """Test Item.describe."""

    def test_default_currency(self):
        """Test the display line format."""
        item = Item(1, "Laptop", 10, 899.99)
        assert item.describe() == "ID: 1 | Name: Laptop | Quantity: 10 | Price: $899.99"

    def test_custom_currency(self):
        """Test a different currency symbol and two-decimal rounding."""
        item = Item(2, "Mouse", 50, 15.5)
        assert item.describe("€") == "ID: 2 | Name: Mouse | Quantity: 50 | Price: €15.50"
