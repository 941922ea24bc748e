"""Tests for the quiz runner."""

import pytest

from console_exercises.quiz import DEFAULT_QUESTIONS, Question, QuizResult, run_quiz

CORRECT = [str(q.answer) for q in DEFAULT_QUESTIONS]
WRONG = [str(q.answer % 4 + 1) for q in DEFAULT_QUESTIONS]


def test_fixture_has_five_questions():
    assert len(DEFAULT_QUESTIONS) == 5
    assert [q.answer for q in DEFAULT_QUESTIONS] == [2, 2, 2, 2, 1]


def test_all_correct(scanner_for, console, output):
    result = run_quiz(scanner_for(*CORRECT), console)
    assert result == QuizResult(5, 5)
    assert output().count("Correct!") == 5
    assert "You scored 5 out of 5." in output()


def test_all_wrong(scanner_for, console, output):
    result = run_quiz(scanner_for(*WRONG), console)
    assert result == QuizResult(0, 5)
    assert "Incorrect. The correct answer is 2." in output()
    assert "Incorrect. The correct answer is 1." in output()
    assert "You scored 0 out of 5." in output()


def test_invalid_then_valid_retry(scanner_for, console, output):
    answers = ["abc", "0", "5"] + CORRECT
    result = run_quiz(scanner_for(*answers), console)
    assert result.score == 5
    assert output().count("Please enter a number between 1 and 4") == 3


def test_invalid_input_is_not_graded(scanner_for, console):
    # "9" is out of range and must not count as a wrong answer
    result = run_quiz(scanner_for("9", "2", *CORRECT[1:]), console)
    assert result.score == 5


def test_options_are_numbered(scanner_for, console, output):
    run_quiz(scanner_for(*CORRECT), console)
    text = output()
    assert "Question 1: What is the largest organ in the human body?" in text
    assert "2) Skin" in text
    assert "Your answer (1, 2, 3, or 4):" in text


def test_end_of_input_propagates(scanner_for, console):
    with pytest.raises(EOFError):
        run_quiz(scanner_for("2"), console)


def test_custom_questions(scanner_for, console):
    questions = [Question("Yes?", ("yes", "no"), 1)]
    assert str(run_quiz(scanner_for("3", "1"), console, questions)) == "1/1"


def test_question_answer_must_be_an_option():
    with pytest.raises(ValueError):
        Question("Q", ("a", "b"), 3)
