"""Field-validated console input.

The scanner keeps asking until a line satisfies its type and range
constraints, so callers never see a malformed or out-of-range value.
Malformed lines are discarded and the user is re-prompted; there is no retry
limit and no timeout.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable
from typing import TypeVar

from rich.console import Console

logger = logging.getLogger(__name__)

N = TypeVar("N", int, float)


def _range_hint(minimum: float | None, maximum: float | None) -> str:
    if minimum is not None and maximum is not None:
        return f"Invalid input. Please enter a number between {minimum} and {maximum}: "
    if minimum is not None:
        return f"Invalid input. Please enter a number of at least {minimum}: "
    if maximum is not None:
        return f"Invalid input. Please enter a number of at most {maximum}: "
    return "Invalid input. Please enter a number: "


def _to_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


class FieldScanner:
    """Reads prompted lines and coerces them to validated values.

    Args:
        console: Console the prompts are written to.
        readline: Zero-argument callable returning the next raw line. It must
            raise ``EOFError`` once input is exhausted. Defaults to ``input``.
    """

    def __init__(self, console: Console, readline: Callable[[], str] | None = None) -> None:
        self.console = console
        self._readline = readline or input

    @classmethod
    def from_lines(cls, lines: Iterable[str], console: Console) -> FieldScanner:
        """Build a scanner that replays ``lines`` and then reports end of input."""
        iterator = iter(lines)

        def readline() -> str:
            try:
                return next(iterator)
            except StopIteration:
                raise EOFError("input exhausted") from None

        return cls(console, readline)

    def _ask(self, prompt: str) -> str:
        self.console.print(prompt, end="", markup=False)
        return self._readline().strip()

    def read_line(self, prompt: str) -> str:
        """Read one line, stripped of surrounding whitespace. May be empty."""
        return self._ask(prompt)

    def read_text(self, prompt: str, retry_prompt: str = "Please enter a value: ") -> str:
        """Read a non-empty line."""
        text = self.read_line(prompt)
        while not text:
            text = self.read_line(retry_prompt)
        return text

    def read_int(
        self,
        prompt: str,
        minimum: int | None = None,
        maximum: int | None = None,
        retry_prompt: str | None = None,
    ) -> int:
        """Read an integer within ``[minimum, maximum]`` (either bound optional)."""
        return self._read_number(prompt, int, minimum, maximum, retry_prompt)

    def read_float(
        self,
        prompt: str,
        minimum: float | None = None,
        maximum: float | None = None,
        retry_prompt: str | None = None,
    ) -> float:
        """Read a finite float within ``[minimum, maximum]`` (either bound optional)."""
        return self._read_number(prompt, _to_float, minimum, maximum, retry_prompt)

    def read_choice(self, prompt: str, low: int, high: int) -> int:
        """Read an option number in ``[low, high]``."""
        return self.read_int(prompt, minimum=low, maximum=high)

    def _read_number(
        self,
        prompt: str,
        convert: Callable[[str], N],
        minimum: N | None,
        maximum: N | None,
        retry_prompt: str | None,
    ) -> N:
        retry_prompt = retry_prompt or _range_hint(minimum, maximum)
        text = self.read_line(prompt)
        while True:
            try:
                value = convert(text)
            except ValueError:
                logger.debug(f"Discarding malformed token {text!r}")
            else:
                if (minimum is None or value >= minimum) and (maximum is None or value <= maximum):
                    return value
                logger.debug(f"Value {value!r} outside [{minimum}, {maximum}]")
            text = self.read_line(retry_prompt)
