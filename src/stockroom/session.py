"""Interactive menu session over an ItemRegistry.

Reads operator commands line by line, parses numeric input, calls the
registry and renders the result. Malformed input cancels the pending
operation before the registry is touched.
"""

from __future__ import annotations

from enum import Enum

import click

from stockroom.helpers import format_price, parse_int, parse_price
from stockroom.logger import InventoryLogger
from stockroom.registry import ItemNotFoundError, ItemRegistry

MENU_TITLE = "Inventory Management System"


class MenuChoice(Enum):
    """Menu options."""

    VIEW = 1
    ADD = 2
    UPDATE = 3
    EXIT = 4


MENU_LABELS = {
    MenuChoice.VIEW: "View Inventory",
    MenuChoice.ADD: "Add New Item",
    MenuChoice.UPDATE: "Update Item Details (Quantity & Price)",
    MenuChoice.EXIT: "Exit",
}


class SessionLoop:
    """Blocking read-eval loop driving one registry.

    All I/O goes through click, so the loop can be driven by CliRunner.
    """

    def __init__(
        self,
        registry: ItemRegistry,
        logger: InventoryLogger | None = None,
        currency: str = "$",
        reject_negative: bool = False,
    ) -> None:
        """
        Args:
            registry: Registry owned by this session
            logger: Activity logger (None disables logging)
            currency: Symbol shown in front of prices
            reject_negative: Treat negative quantity/price as malformed input
        """
        self.registry = registry
        self.logger = logger
        self.currency = currency
        self.reject_negative = reject_negative

    def run(self) -> None:
        """Show the menu and handle commands until Exit or end of input."""
        self._log("info", "Session started", item_count=len(self.registry))

        while True:
            self.display_menu()
            try:
                raw = self._read("Enter choice")
                choice = parse_int(raw)
                if choice is None:
                    click.echo("Invalid input. Please enter a number.")
                    continue
                if not self.dispatch(choice):
                    break
            except click.Abort:
                # EOF or Ctrl-C ends the session like Exit
                click.echo("")
                click.echo("Exiting application. Goodbye!")
                break

        self._log("info", "Session ended", item_count=len(self.registry))

    def display_menu(self) -> None:
        """Print the numbered menu."""
        click.echo(MENU_TITLE)
        for choice in MenuChoice:
            click.echo(f"{choice.value}. {MENU_LABELS[choice]}")

    def dispatch(self, choice: int) -> bool:
        """Run one menu command.

        Args:
            choice: Menu number entered by the operator

        Returns:
            False when the session should end, True otherwise
        """
        try:
            command = MenuChoice(choice)
        except ValueError:
            click.echo("Invalid choice. Please try again.")
            return True

        if command is MenuChoice.VIEW:
            self.view_inventory()
        elif command is MenuChoice.ADD:
            self.handle_add_item()
        elif command is MenuChoice.UPDATE:
            self.handle_update_item()
        else:
            click.echo("Exiting application. Goodbye!")
            return False
        return True

    def view_inventory(self) -> None:
        """Print every item, or a notice when the registry is empty."""
        items = self.registry.list_items()
        if not items:
            click.echo("Inventory is empty.")
            return

        click.echo("")
        click.echo("--- Current Inventory ---")
        for item in items:
            click.echo(item.describe(self.currency))
        click.echo("-------------------------")
        click.echo("")

    def handle_add_item(self) -> None:
        """Prompt for name, quantity and price, then add the item."""
        name = self._read("Enter item name")

        quantity = self._read_int("Enter item quantity", "quantity")
        if quantity is None:
            return

        price = self._read_price("Enter item price", "price")
        if price is None:
            return

        item = self.registry.add(name, quantity, price)
        click.echo(f"-> Added: {item.name} (ID {item.id})")
        self._log(
            "info",
            "Item added",
            item_id=item.id,
            name=item.name,
            quantity=item.quantity,
            unit_price=item.unit_price,
        )

    def handle_update_item(self) -> None:
        """Prompt for id, new quantity and new price, then update the item."""
        item_id = self._read_int("Enter Item ID to update", "ID", allow_negative=True)
        if item_id is None:
            return

        quantity = self._read_int("Enter new quantity", "quantity")
        if quantity is None:
            return

        price = self._read_price("Enter new price", "price")
        if price is None:
            return

        try:
            self.registry.update(item_id, quantity, price)
        except ItemNotFoundError as e:
            click.echo(f"Error: {e}")
            self._log("warning", "Item not found", item_id=e.item_id)
            return

        click.echo(
            f"-> Updated details for ID {item_id}. "
            f"New Quantity: {quantity}, New Price: {format_price(price, self.currency)}"
        )
        self._log("info", "Item updated", item_id=item_id, quantity=quantity, unit_price=price)

    def _read(self, prompt: str) -> str:
        """Read one line; empty input is returned as an empty string."""
        return click.prompt(prompt, default="", show_default=False)

    def _read_int(self, prompt: str, field: str, allow_negative: bool = False) -> int | None:
        raw = self._read(prompt)
        value = parse_int(raw)
        if value is None or (value < 0 and self.reject_negative and not allow_negative):
            self._reject(field, raw)
            return None
        return value

    def _read_price(self, prompt: str, field: str) -> float | None:
        raw = self._read(prompt)
        value = parse_price(raw)
        if value is None or (value < 0 and self.reject_negative):
            self._reject(field, raw)
            return None
        return value

    def _reject(self, field: str, raw: str) -> None:
        click.echo(f"Invalid {field} format. Operation cancelled.")
        self._log("warning", "Input rejected", field=field, raw=raw)

    def _log(self, level: str, message: str, **kwargs) -> None:
        if self.logger is None:
            return
        try:
            getattr(self.logger, level)(message, **kwargs)
        except OSError as e:
            # Logging stops for the rest of the session; the menu keeps running
            click.echo(f"Warning: activity log disabled ({e})")
            self.logger = None
