"""Command-line interface for the console exercises."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError
from rich.logging import RichHandler

from console_exercises import __version__ as EXERCISES_VERSION
from console_exercises.config import ExercisesConfig, console, load_config_from_env, load_config_from_yaml
from console_exercises.library import run_library
from console_exercises.menu import Command, CommandLoop
from console_exercises.quiz import run_quiz
from console_exercises.scanner import FieldScanner
from console_exercises.stocks import run_stock_report
from console_exercises.students import run_students
from console_exercises.vehicles import run_vehicle_demo

app = typer.Typer(
    name="exercises",
    help="Console exercises: library, quiz, stock statistics, students and vehicles",
    invoke_without_command=True,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


def _load_config(config_file: Optional[Path]) -> ExercisesConfig:
    try:
        if config_file:
            config = load_config_from_yaml(str(config_file))
            logger.debug(f"Loaded configuration from {config_file}")
            return config
        return load_config_from_env()
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"Failed to load configuration: {e}", style="red", markup=False)
        raise typer.Exit(1)


def _get_config(ctx: typer.Context) -> ExercisesConfig:
    if ctx.obj is None:
        ctx.obj = load_config_from_env()
    return ctx.obj


def _run_program(program) -> None:
    """Run an interactive program, treating end of input as a normal exit."""
    try:
        program()
    except (EOFError, KeyboardInterrupt):
        console.print("\n[yellow]Interrupted[/yellow]")


def _launcher(config: ExercisesConfig, scanner: FieldScanner) -> CommandLoop:
    """Build the top-level menu that starts each program with a shared scanner."""

    def start(program):
        return lambda: _run_program(program)

    def stock_report() -> None:
        run_stock_report(config.stocks.prices, config.stocks.target, console)

    return CommandLoop(
        "Console Exercises",
        [
            Command("Library System", start(lambda: run_library(config.library, scanner, console))),
            Command("Quiz", start(lambda: run_quiz(scanner, console))),
            Command("Stock Price Analysis", stock_report),
            Command("Student Management System", start(lambda: run_students(config.students, scanner, console))),
            Command("Vehicle Information System", start(lambda: run_vehicle_demo(scanner, console))),
            Command("Exit", lambda: "Goodbye!", exits=True),
        ],
        scanner,
        console,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to YAML configuration file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):
    """Run one of the console exercises.

    Running 'exercises' with no sub-command opens a menu of all programs.

    Examples:
        # Pick a program from the menu
        exercises

        # Manage the library inventory
        exercises library

        # Analyze custom prices
        exercises stocks --price 10 --price 12.5 --target 10

        # Student records with a capacity of 5
        exercises students --max-students 5
    """
    setup_logging(verbose)
    loaded = _load_config(config)
    if loaded.verbose and not verbose:
        setup_logging(True)
    ctx.obj = loaded

    # If a subcommand is invoked, let it handle execution
    if ctx.invoked_subcommand is not None:
        return

    _launcher(loaded, FieldScanner(console)).run()


@app.command()
def library(ctx: typer.Context):
    """Track book copies: add, borrow, return and list titles."""
    config = _get_config(ctx)
    _run_program(lambda: run_library(config.library, FieldScanner(console), console))


@app.command()
def quiz():
    """Answer five multiple-choice questions."""
    _run_program(lambda: run_quiz(FieldScanner(console), console))


@app.command()
def stocks(
    ctx: typer.Context,
    price: Optional[List[float]] = typer.Option(
        None,
        "--price",
        "-p",
        help="Price sample (repeat for several; default: built-in series)",
    ),
    target: Optional[float] = typer.Option(
        None,
        "--target",
        "-t",
        help="Price whose exact occurrences are counted (default: 105.0)",
    ),
):
    """Print average, maximum, occurrence count and cumulative sums of stock prices."""
    config = _get_config(ctx).stocks
    prices = price or config.prices
    if not prices:
        console.print("[red]No price samples to analyze.[/red]")
        raise typer.Exit(1)
    run_stock_report(prices, config.target if target is None else target, console)


@app.command()
def students(
    ctx: typer.Context,
    max_students: Optional[int] = typer.Option(
        None,
        "--max-students",
        min=1,
        help="Registry capacity (default: 100)",
    ),
):
    """Manage a fixed-capacity list of student records."""
    config = _get_config(ctx).students
    if max_students is not None:
        config = config.model_copy(update={"max_students": max_students})
    _run_program(lambda: run_students(config, FieldScanner(console), console))


@app.command()
def vehicles():
    """Enter a car, a motorcycle and a truck, then print their details."""
    _run_program(lambda: run_vehicle_demo(FieldScanner(console), console))


@app.command()
def init(
    output: Path = typer.Option(
        ".env",
        "--output",
        "-o",
        help="Output configuration file path (default: .env)",
    ),
):
    """Initialize a new configuration file.

    Creates an environment file with the exercise settings.
    """
    config_content = """# Console Exercises Configuration
# Set your environment variables below

# Student record manager capacity
EXERCISES_MAX_STUDENTS=100

# Stock statistics samples (JSON list) and the price to count
EXERCISES_STOCK_PRICES=[100.5, 102.3, 101.7, 105.0, 103.2, 107.8, 106.4, 108.9, 104.1, 109.5]
EXERCISES_STOCK_TARGET=105.0

# Optional: library welcome banner
# EXERCISES_LIBRARY_WELCOME=Welcome to the library!

# EXERCISES_VERBOSE=false
"""

    with open(output, "w") as f:
        f.write(config_content)

    console.print(f"[green]✓ Created configuration file: {output}[/green]")
    console.print("[dim]You can now run the CLI:[/dim]")
    console.print("[dim]  exercises[/dim]")


@app.command()
def version():
    """Show version information."""
    console.print(f"Console Exercises v{EXERCISES_VERSION}")


if __name__ == "__main__":
    app()
