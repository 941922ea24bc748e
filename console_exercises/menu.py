"""Read-dispatch-print loop behind every menu-driven program."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from rich.console import Console

from console_exercises.config import COLORS
from console_exercises.exceptions import ExerciseError
from console_exercises.scanner import FieldScanner

logger = logging.getLogger(__name__)


class LoopState(str, Enum):
    """States of a command loop."""

    AWAITING_CHOICE = "awaiting_choice"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


@dataclass
class Command:
    """A numbered menu entry.

    The handler may perform further validated reads. It returns the outcome
    message to print (or None to print nothing) and reports domain failures
    by raising ExerciseError.
    """

    label: str
    handler: Callable[[], str | None]
    exits: bool = False


class CommandLoop:
    """Displays a menu, reads a selection and dispatches it until an exit command.

    Commands are numbered from 1 in the order given. Unknown selections are
    reported and the menu is shown again; nothing is retried automatically.
    """

    def __init__(
        self,
        title: str,
        commands: Sequence[Command],
        scanner: FieldScanner,
        console: Console,
        choice_prompt: str = "Enter your choice: ",
    ) -> None:
        if not any(command.exits for command in commands):
            raise ValueError("a command loop needs at least one exit command")
        self.title = title
        self.commands = list(commands)
        self.scanner = scanner
        self.console = console
        self.choice_prompt = choice_prompt
        self.state = LoopState.AWAITING_CHOICE

    def show_menu(self) -> None:
        self.console.print()
        self.console.print(self.title, style=f"bold {COLORS['primary']}", markup=False)
        for number, command in enumerate(self.commands, 1):
            self.console.print(f"{number}. {command.label}", markup=False)

    def dispatch(self, choice: int) -> bool:
        """Run the command numbered ``choice`` and print its outcome.

        Returns:
            True if a command ran, False for an unrecognized selection.
        """
        if not 1 <= choice <= len(self.commands):
            self.console.print("Invalid choice. Please try again.", style=COLORS["warning"])
            return False

        command = self.commands[choice - 1]
        self.state = LoopState.DISPATCHING
        logger.debug(f"Dispatching {command.label!r}")
        try:
            outcome = command.handler()
        except ExerciseError as e:
            self.console.print(e.message, style=COLORS["error"], markup=False)
        except (EOFError, KeyboardInterrupt):
            self.state = LoopState.TERMINATED
            raise
        else:
            if outcome:
                self.console.print(outcome, style=COLORS["success"], markup=False)

        self.state = LoopState.TERMINATED if command.exits else LoopState.AWAITING_CHOICE
        return True

    def run(self) -> int:
        """Run until an exit command is chosen or input ends at the menu prompt.

        Input ending inside a command propagates to the caller, since the
        command was left half-finished.

        Returns:
            Number of dispatched commands, not counting unrecognized selections.
        """
        self.state = LoopState.AWAITING_CHOICE
        dispatched = 0
        while self.state is not LoopState.TERMINATED:
            self.show_menu()
            try:
                choice = self.scanner.read_int(self.choice_prompt)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                logger.debug("Input closed, leaving command loop")
                self.state = LoopState.TERMINATED
                break
            if self.dispatch(choice):
                dispatched += 1
        return dispatched
