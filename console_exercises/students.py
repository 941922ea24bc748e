"""Fixed-capacity student record manager."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from console_exercises.config import StudentConfig
from console_exercises.exceptions import DuplicateRecordError
from console_exercises.menu import Command, CommandLoop
from console_exercises.scanner import FieldScanner
from console_exercises.store import RecordStore

MAX_AGE = 150


@dataclass
class Student:
    student_id: str
    name: str
    age: int
    grade: str

    def __str__(self) -> str:
        return f"Student ID: {self.student_id}, Name: {self.name}, Age: {self.age}, Grade: {self.grade}"


class StudentRegistry(RecordStore[Student]):
    """Students keyed by ID, bounded by a fixed capacity.

    A second add with a known ID is rejected rather than overwriting.
    """

    not_found_message = "Student not found."
    duplicate_message = "Student ID {key} already exists."
    capacity_message = "Cannot add more students. Maximum capacity reached."
    empty_message = "No students to display."

    def add_student(self, student: Student) -> None:
        self.add(student.student_id, student)

    def update_student(self, student_id: str, name: str, age: int, grade: str) -> Student:
        return self.update(student_id, Student(student_id, name, age, grade))


def _read_details(scanner: FieldScanner) -> tuple[str, int, str]:
    name = scanner.read_text("Enter Student Name: ")
    age = scanner.read_int("Enter Student Age: ", minimum=0, maximum=MAX_AGE)
    grade = scanner.read_text("Enter Student Grade: ")
    return name, age, grade


def build_student_loop(registry: StudentRegistry, scanner: FieldScanner, console: Console) -> CommandLoop:
    def add() -> str:
        # Report a full registry before asking for any field
        registry.check_capacity()
        student_id = scanner.read_text("Enter Student ID: ")
        if student_id in registry:
            raise DuplicateRecordError(student_id, registry.duplicate_message.format(key=student_id))
        name, age, grade = _read_details(scanner)
        registry.add_student(Student(student_id, name, age, grade))
        return "Student added successfully."

    def update() -> str:
        student_id = scanner.read_text("Enter Student ID to update: ")
        registry.get(student_id)
        registry.update_student(student_id, *_read_details(scanner))
        return "Student updated successfully."

    def view() -> str:
        student_id = scanner.read_text("Enter Student ID to view: ")
        return str(registry.get(student_id))

    def view_all() -> None:
        for student in registry.records():
            console.print(str(student), markup=False)

    return CommandLoop(
        "Student Management System",
        [
            Command("Add Student", add),
            Command("Update Student", update),
            Command("View Student", view),
            Command("View All Students", view_all),
            Command("Exit", lambda: "Exiting...", exits=True),
        ],
        scanner,
        console,
    )


def run_students(config: StudentConfig, scanner: FieldScanner, console: Console) -> StudentRegistry:
    """Run the student menu until the user exits and return the final registry."""
    registry = StudentRegistry(capacity=config.max_students)
    build_student_loop(registry, scanner, console).run()
    return registry
