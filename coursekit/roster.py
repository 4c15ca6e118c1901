"""Interactive menu for browsing and editing a roster of students."""

import argparse
import sys
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from coursekit.dllist import DLList
from coursekit.student import (
    CITY_LIMIT,
    MAJOR_LIMIT,
    NAME_LIMIT,
    PHONE_LIMIT,
    Student,
    parse_students,
)

_RULE = "=" * 50
_COLUMNS = f"{'ID':<11}{'NAME':<25}{'MAJOR':<10}GPA\n"

MENU = (
    "============= MENU =============\n"
    "A: Add a new student\n"
    "I: Front Insert a new student\n"
    "B: Rear Insert a new student\n"
    "O: Insert after a student\n"
    "U: Insert before a student\n"
    "F: Find a student\n"
    "R: Remove a student\n"
    "E: Front Remove a student\n"
    "Z: Rear Remove a student\n"
    "C: Count the students\n"
    "V: Reverse display the students\n"
    "D: Display the students\n"
    "Q: Quit\n"
    "================================\n"
    "Enter your choice: "
)


def format_table(title: str, width: int, students: Iterable[Student]) -> str:
    """Return a titled table of students; ``width`` spans the title and its newline."""
    parts = ["\n\n", f"{title}\n".rjust(width), _RULE, "\n", _COLUMNS, _RULE, "\n"]
    parts.extend(f"{student.row()}\n" for student in students)
    parts.append("\n")
    return "".join(parts)


def load_students(path: str) -> List[Student]:
    """Read the student records stored in ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_students(handle.read())


class Roster:
    """Menu-driven session over a sorted list of students."""

    def __init__(
        self,
        students: Iterable[Student] = (),
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.students = DLList(students)
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self._actions: Dict[str, Callable[[], None]] = {
            "A": self._add,
            "I": self._insert_front,
            "B": self._insert_rear,
            "O": self._insert_after,
            "U": self._insert_before,
            "F": self._find,
            "R": self._remove,
            "E": self._remove_front,
            "Z": self._remove_rear,
            "C": self._count,
            "V": self._display_reverse,
            "D": self._display,
        }

    def run(self) -> None:
        """Show the menu and carry out choices until Q or end of input."""
        try:
            while True:
                choice = self._choose()
                if choice == "Q":
                    return
                try:
                    self._actions[choice]()
                except ValueError as exc:
                    self._error(f"\n\nInvalid input: {exc}\n\n")
        except EOFError:
            return

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _error(self, text: str) -> None:
        self._stderr.write(text)
        self._stderr.flush()

    def _readline(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._readline()

    def _ask_word(self, prompt: str, what: str) -> str:
        while True:
            words = self._ask(prompt).split()
            if words:
                return words[0]
            prompt = ""

    def _ask_int(self, prompt: str, what: str) -> int:
        word = self._ask_word(prompt, what)
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"{what} must be a whole number") from None

    def _ask_float(self, prompt: str, what: str) -> float:
        word = self._ask_word(prompt, what)
        try:
            return float(word)
        except ValueError:
            raise ValueError(f"{what} must be a number") from None

    @staticmethod
    def _limit(value: str, limit: int, what: str) -> str:
        if len(value) > limit:
            raise ValueError(f"{what} longer than {limit} characters")
        return value

    def _choose(self) -> str:
        self._write(MENU)
        while True:
            text = self._readline().strip()
            if not text:
                continue
            choice = text[0].upper()
            if choice == "Q" or choice in self._actions:
                return choice
            self._error("\n\aInvalid choice\nPlease try again: ")

    def _read_student(self) -> Student:
        student_id = self._ask_int("\n\nID: ", "ID")
        name = self._limit(self._ask("Name (e.g. Smith, John A): "), NAME_LIMIT, "name")
        city = self._limit(
            self._ask("City, State (e.g. San Diego, California): "), CITY_LIMIT, "city"
        )
        phone = self._limit(
            self._ask_word("Phone Number (e.g. [phone]): ", "phone"), PHONE_LIMIT, "phone"
        )
        gender = self._ask_word("Gender (M/F): ", "gender")[0]
        year = self._ask_int("Year (1-5): ", "year")
        credits = self._ask_int("Credits (0-200): ", "credits")
        gpa = self._ask_float("Gpa (0.00-4.00): ", "GPA")
        major = self._limit(
            self._ask_word("Major (e.g. MATH): ", "major"), MAJOR_LIMIT, "major"
        )
        return Student(
            id=student_id,
            name=name,
            city_state=city,
            phone=phone,
            gender=gender,
            year=year,
            credits=credits,
            gpa=gpa,
            major=major,
        )

    def _added(self, student: Student) -> None:
        self._write(format_table("STUDENT ADDED", 31, [student]))

    def _add(self) -> None:
        student = self._read_student()
        self.students.insert(student)
        self._added(student)

    def _insert_front(self) -> None:
        student = self._read_student()
        self.students.insert_front(student)
        self._added(student)

    def _insert_rear(self) -> None:
        student = self._read_student()
        self.students.insert_rear(student)
        self._added(student)

    def _insert_after(self) -> None:
        anchor = self._ask_int(
            "\n\nEnter the student data (ID) after which new student will be added: ",
            "ID",
        )
        student = self._read_student()
        try:
            self.students.insert_after(student, anchor)
        except ValueError:
            self._error("\n\nStudent not found\n\n")
            return
        self._added(student)

    def _insert_before(self) -> None:
        anchor = self._ask_int(
            "\n\nEnter the student data (ID) before which new student will be added: ",
            "ID",
        )
        student = self._read_student()
        try:
            self.students.insert_before(student, anchor)
        except ValueError:
            self._error("\n\nStudent not found\n\n")
            return
        self._added(student)

    def _find(self) -> None:
        student_id = self._ask_int("\n\nEnter the student's ID to find: ", "ID")
        try:
            found = self.students.retrieve(student_id)
        except ValueError:
            self._error("\n\nStudent not found\n\n")
            return
        self._write(format_table("STUDENT FOUND", 33, [found]))

    def _remove(self) -> None:
        student_id = self._ask_int("\n\nEnter the student's ID to remove: ", "ID")
        try:
            removed = self.students.remove(student_id)
        except ValueError:
            self._error("\n\nStudent not found\n\n")
            return
        self._write(format_table("STUDENT REMOVED", 32, [removed]))

    def _remove_front(self) -> None:
        try:
            removed = self.students.remove_front()
        except IndexError:
            self._error("\n\nList is empty\n\n")
            return
        self._write(format_table("STUDENT REMOVED", 32, [removed]))

    def _remove_rear(self) -> None:
        try:
            removed = self.students.remove_rear()
        except IndexError:
            self._error("\n\nList is empty\n\n")
            return
        self._write(format_table("STUDENT REMOVED", 32, [removed]))

    def _count(self) -> None:
        self._write(f"\n\nNumber of students: {len(self.students)}\n\n")

    def _display(self) -> None:
        self._write(format_table("STUDENT LIST", 32, self.students))

    def _display_reverse(self) -> None:
        self._write(format_table("REVERSE STUDENT LIST", 36, reversed(self.students)))


def main(argv=None) -> int:
    """Load the student file and run the interactive menu."""
    parser = argparse.ArgumentParser(description="Browse and edit a student roster.")
    parser.add_argument("path", nargs="?", default="studentFile.txt")
    args = parser.parse_args(argv)

    students: List[Student] = []
    try:
        students = load_students(args.path)
    except OSError:
        print("Error opening file\n", file=sys.stderr)
    except ValueError as exc:
        print(f"Error reading {args.path}: {exc}", file=sys.stderr)
        return 1

    Roster(students).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())