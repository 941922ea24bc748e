"""Entry point for running console_exercises as a module."""

from console_exercises.cli import app

if __name__ == "__main__":
    app(prog_name="exercises")
