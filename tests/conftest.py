"""Shared fixtures for the console exercise tests."""

import io

import pytest
from rich.console import Console

from console_exercises.scanner import FieldScanner


@pytest.fixture
def console():
    """Console writing plain text into a buffer."""
    return Console(file=io.StringIO(), highlight=False, soft_wrap=True, color_system=None)


@pytest.fixture
def output(console):
    """Text printed to the test console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def scanner_for(console):
    """Build a scanner replaying the given input lines."""
    return lambda *lines: FieldScanner.from_lines(lines, console)
