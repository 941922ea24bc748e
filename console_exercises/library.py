"""Library inventory tracker: book titles mapped to copy counts."""

from __future__ import annotations

import logging

from rich.console import Console

from console_exercises.config import COLORS, LibraryConfig
from console_exercises.exceptions import InsufficientQuantityError
from console_exercises.menu import Command, CommandLoop
from console_exercises.scanner import FieldScanner
from console_exercises.store import RecordStore

logger = logging.getLogger(__name__)


class Inventory(RecordStore[int]):
    """Copy counts per title. Adding a known title sums the quantities."""

    not_found_message = "Error: {key} does not belong to this library."
    insufficient_message = "Error: Not enough copies of {key} available."
    empty_message = "The library has no books yet."

    def merge(self, key: str, existing: int, incoming: int) -> int:
        return existing + incoming

    def adjust_quantity(self, key: str, delta: int) -> int:
        """Apply ``delta`` to the stock of ``key`` and return the new quantity.

        Raises:
            RecordNotFoundError: Unknown title.
            InsufficientQuantityError: The result would be negative; stock is unchanged.
        """
        current = self.get(key)
        if current + delta < 0:
            raise InsufficientQuantityError(
                key, -delta, current, self.insufficient_message.format(key=key)
            )
        self._records[key] = current + delta
        logger.debug(f"Stock of {key!r}: {current} -> {current + delta}")
        return current + delta

    def add_book(self, title: str, quantity: int) -> bool:
        return self.add(title, quantity)

    def borrow(self, title: str, quantity: int) -> int:
        """Take ``quantity`` copies out; an unknown title counts as no copies available."""
        if title not in self:
            raise InsufficientQuantityError(
                title, quantity, 0, self.insufficient_message.format(key=title)
            )
        return self.adjust_quantity(title, -quantity)

    def return_(self, title: str, quantity: int) -> int:
        """Put ``quantity`` copies back. Never creates a new title."""
        return self.adjust_quantity(title, quantity)


def build_library_loop(inventory: Inventory, scanner: FieldScanner, console: Console) -> CommandLoop:
    def read_title() -> str:
        return scanner.read_text("Enter Book Title: ")

    def add() -> str:
        title = read_title()
        quantity = scanner.read_int("Enter Quantity: ", minimum=0)
        if inventory.add_book(title, quantity):
            return f"{title} added to the library."
        return f"Quantity of {title} updated."

    def borrow() -> str:
        title = read_title()
        quantity = scanner.read_int("Enter Quantity to Borrow: ", minimum=0)
        inventory.borrow(title, quantity)
        return f"{quantity} copies of {title} borrowed successfully."

    def return_book() -> str:
        title = read_title()
        quantity = scanner.read_int("Enter Quantity to Return: ", minimum=0)
        inventory.return_(title, quantity)
        return f"{quantity} copies of {title} returned successfully."

    def show() -> None:
        for title, quantity in inventory.items():
            console.print(f"{title}: {quantity}", markup=False)

    return CommandLoop(
        "Library System",
        [
            Command("Add new Book", add),
            Command("Borrow a Book", borrow),
            Command("Return a Book", return_book),
            Command("View Inventory", show),
            Command("Exit", lambda: "Exiting the Library System.", exits=True),
        ],
        scanner,
        console,
    )


def run_library(config: LibraryConfig, scanner: FieldScanner, console: Console) -> Inventory:
    """Run the library menu until the user exits and return the final inventory."""
    console.print(config.welcome, style=f"bold {COLORS['primary']}", markup=False)
    inventory = Inventory()
    build_library_loop(inventory, scanner, console).run()
    return inventory
