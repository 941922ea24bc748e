"""Multiple-choice quiz runner.

Questions are asked once, top to bottom, and graded immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console

from console_exercises.config import COLORS
from console_exercises.scanner import FieldScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Question:
    prompt: str
    options: tuple[str, ...]
    answer: int  # 1-based index into options

    def __post_init__(self) -> None:
        if not 1 <= self.answer <= len(self.options):
            raise ValueError(f"answer {self.answer} is not one of the {len(self.options)} options")


@dataclass(frozen=True)
class QuizResult:
    score: int
    total: int

    def __str__(self) -> str:
        return f"{self.score}/{self.total}"


DEFAULT_QUESTIONS = (
    Question(
        "What is the largest organ in the human body?",
        ("Mesentery", "Skin", "Brain", "Heart"),
        2,
    ),
    Question(
        "What is the largest country by land area?",
        ("China", "Russia", "Canada", "USA"),
        2,
    ),
    Question("What is 2 + 2?", ("3", "4", "5", "6"), 2),
    Question(
        "Who wrote 'To Kill a Mockingbird'?",
        ("Mark Twain", "Harper Lee", "Ernest Hemingway", "F. Scott Fitzgerald"),
        2,
    ),
    Question(
        "What is the chemical symbol for water?",
        ("H2O", "CO2", "O2", "NaCl"),
        1,
    ),
)


def _answer_prompt(count: int) -> str:
    numbers = [str(n) for n in range(1, count + 1)]
    if count <= 2:
        return f"Your answer ({' or '.join(numbers)}): "
    return f"Your answer ({', '.join(numbers[:-1])}, or {numbers[-1]}): "


def run_quiz(
    scanner: FieldScanner,
    console: Console,
    questions: Sequence[Question] = DEFAULT_QUESTIONS,
) -> QuizResult:
    """Ask every question once and return the final score."""
    score = 0
    for number, question in enumerate(questions, 1):
        console.print()
        console.print(f"Question {number}: {question.prompt}", style="bold", markup=False)
        for index, option in enumerate(question.options, 1):
            console.print(f"{index}) {option}", markup=False)

        answer = scanner.read_choice(_answer_prompt(len(question.options)), 1, len(question.options))
        if answer == question.answer:
            console.print("Correct!", style=COLORS["success"])
            score += 1
        else:
            console.print(f"Incorrect. The correct answer is {question.answer}.", style=COLORS["error"])
        logger.debug(f"Question {number}: answered {answer}, score {score}")

    result = QuizResult(score, len(questions))
    console.print()
    console.print(f"You scored {result.score} out of {result.total}.", style="bold")
    return result
