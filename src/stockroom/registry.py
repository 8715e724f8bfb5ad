"""In-memory item registry.

Owns the inventory records for one process run, assigns identifiers and
performs lookup/add/update. Nothing here is persisted.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from stockroom.helpers import format_price

DEFAULT_SEED_ITEMS = [
    {"name": "Laptop", "quantity": 10, "unit_price": 899.99},
    {"name": "Mouse", "quantity": 50, "unit_price": 15.50},
]


class ItemNotFoundError(ValueError):
    """Raised when an operation references an id absent from the registry."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Item with ID {item_id} not found.")
        self.item_id = item_id


@dataclass
class Item:
    """A single inventory record."""

    id: int
    name: str
    quantity: int
    unit_price: float

    def describe(self, currency: str = "$") -> str:
        """Render the item as a single display line.

        Args:
            currency: Symbol printed in front of the price.

        Returns:
            "ID: 1 | Name: Laptop | Quantity: 10 | Price: $899.99"
        """
        return (
            f"ID: {self.id} | Name: {self.name} | "
            f"Quantity: {self.quantity} | Price: {format_price(self.unit_price, currency)}"
        )


class ItemRegistry:
    """Ordered collection of items plus the next-id counter.

    Insertion order is display order. Ids start at 1, grow by one per add
    and are never reused.
    """

    def __init__(self, seed_items: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        """
        Args:
            seed_items: Mappings with name, quantity and unit_price added in
                order at construction. None uses the Laptop/Mouse defaults.
        """
        self._items: list[Item] = []
        self._next_id = 1

        if seed_items is None:
            seed_items = DEFAULT_SEED_ITEMS
        for seed in seed_items:
            self.add(seed["name"], seed["quantity"], seed["unit_price"])

    @property
    def next_id(self) -> int:
        """Id the next added item will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._items)

    def add(self, name: str, quantity: int, unit_price: float) -> Item:
        """Create an item with the next id and append it.

        Args:
            name: Item label (not validated)
            quantity: Stock count
            unit_price: Price per unit

        Returns:
            The newly created item
        """
        item = Item(id=self._next_id, name=name, quantity=quantity, unit_price=unit_price)
        self._items.append(item)
        self._next_id += 1
        return item

    def list_items(self) -> tuple[Item, ...]:
        """Return every item in insertion order."""
        return tuple(self._items)

    def find_by_id(self, item_id: int) -> Optional[Item]:
        """Find an item by id.

        Args:
            item_id: Id to look up

        Returns:
            The matching item, or None if no item has that id
        """
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def update(self, item_id: int, quantity: int, unit_price: float) -> Item:
        """Replace the quantity and unit price of an existing item.

        Name and id are never changed.

        Args:
            item_id: Id of the item to update
            quantity: New stock count
            unit_price: New price per unit

        Returns:
            The updated item

        Raises:
            ItemNotFoundError: If no item has that id. The registry is unchanged.
        """
        item = self.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)

        item.quantity = quantity
        item.unit_price = unit_price
        return item
