"""Tests for the student record manager."""

import pytest

from console_exercises.config import MAX_STUDENTS, StudentConfig
from console_exercises.exceptions import CapacityExceededError, DuplicateRecordError, RecordNotFoundError
from console_exercises.students import Student, StudentRegistry, build_student_loop, run_students


def make_student(n: int) -> Student:
    return Student(f"S{n:03d}", f"Student {n}", 18 + n % 5, "A")


class TestStudentRegistry:
    def test_capacity_default_bound(self):
        registry = StudentRegistry(capacity=MAX_STUDENTS)
        for n in range(MAX_STUDENTS):
            registry.add_student(make_student(n))
        assert len(registry) == MAX_STUDENTS

        with pytest.raises(CapacityExceededError, match="Maximum capacity reached"):
            registry.add_student(make_student(MAX_STUDENTS))
        assert len(registry) == MAX_STUDENTS
        assert f"S{MAX_STUDENTS:03d}" not in registry

    def test_duplicate_id_rejected(self):
        registry = StudentRegistry(capacity=5)
        registry.add_student(Student("S1", "Ada", 20, "A"))
        with pytest.raises(DuplicateRecordError):
            registry.add_student(Student("S1", "Bob", 21, "B"))
        assert registry.get("S1").name == "Ada"

    def test_update_student(self):
        registry = StudentRegistry(capacity=5)
        registry.add_student(Student("S1", "Ada", 20, "A"))
        registry.add_student(Student("S2", "Bob", 21, "B"))
        registry.update_student("S1", "Ada L.", 21, "A+")
        assert registry.get("S1") == Student("S1", "Ada L.", 21, "A+")
        assert [s.student_id for s in registry.records()] == ["S1", "S2"]

    def test_update_unknown(self):
        with pytest.raises(RecordNotFoundError, match="Student not found."):
            StudentRegistry(capacity=5).update_student("nope", "X", 1, "C")

    def test_str_format(self):
        assert str(Student("S1", "Ada", 20, "A")) == "Student ID: S1, Name: Ada, Age: 20, Grade: A"


class TestStudentLoop:
    def test_add_view_update_list(self, scanner_for, console, output):
        registry = StudentRegistry(capacity=10)
        scanner = scanner_for(
            "1", "S1", "Ada", "20", "A",
            "3", "S1",
            "2", "S1", "Ada Lovelace", "twenty", "21", "A+",
            "2", "S9",
            "3", "S9",
            "4",
            "5",
        )
        build_student_loop(registry, scanner, console).run()

        text = output()
        assert "Student added successfully." in text
        assert "Student ID: S1, Name: Ada, Age: 20, Grade: A" in text
        assert "Student updated successfully." in text
        assert text.count("Student not found.") == 2
        assert "Student ID: S1, Name: Ada Lovelace, Age: 21, Grade: A+" in text
        assert "Exiting..." in text

    def test_view_all_empty(self, scanner_for, console, output):
        build_student_loop(StudentRegistry(capacity=1), scanner_for("4", "5"), console).run()
        assert "No students to display." in output()

    def test_full_registry_reports_before_prompting(self, scanner_for, console, output):
        registry = StudentRegistry(capacity=1)
        scanner = scanner_for("1", "S1", "Ada", "20", "A", "1", "5")
        build_student_loop(registry, scanner, console).run()

        text = output()
        assert "Cannot add more students. Maximum capacity reached." in text
        assert text.count("Enter Student ID") == 1
        assert len(registry) == 1

    def test_duplicate_add_reported(self, scanner_for, console, output):
        registry = StudentRegistry(capacity=3)
        scanner = scanner_for("1", "S1", "Ada", "20", "A", "1", "S1", "5")
        build_student_loop(registry, scanner, console).run()
        assert "Student ID S1 already exists." in output()
        assert len(registry) == 1

    def test_age_range_validated(self, scanner_for, console):
        registry = run_students(
            StudentConfig(max_students=2),
            scanner_for("1", "S1", "Ada", "-4", "500", "19", "B", "5"),
            console,
        )
        assert registry.get("S1").age == 19
        assert registry.capacity == 2
