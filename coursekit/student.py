"""Student records ordered by their ID, and a reader for the record file."""

import re
import string
from dataclasses import dataclass
from typing import List

NAME_LIMIT = 49
CITY_LIMIT = 49
PHONE_LIMIT = 11
MAJOR_LIMIT = 5

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WORD = re.compile(r"\S+")
_CHAR = re.compile(r"\S")


@dataclass(eq=False)
class Student:
    """A student; comparisons use only the ID and also accept plain ints."""

    id: int = 0
    name: str = ""
    city_state: str = ""
    phone: str = ""
    gender: str = ""
    year: int = 0
    credits: int = 0
    gpa: float = 0.0
    major: str = ""

    def row(self) -> str:
        """Return the ID, name, major and GPA laid out in fixed columns."""
        return f"{self.id:<11}{self.name:<25}{self.major:<10}{self.gpa:g}"

    @staticmethod
    def _key(other):
        if isinstance(other, Student):
            return other.id
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return NotImplemented

    def __eq__(self, other) -> bool:
        key = self._key(other)
        return key if key is NotImplemented else self.id == key

    def __lt__(self, other) -> bool:
        key = self._key(other)
        return key if key is NotImplemented else self.id < key

    def __le__(self, other) -> bool:
        key = self._key(other)
        return key if key is NotImplemented else self.id <= key

    def __gt__(self, other) -> bool:
        key = self._key(other)
        return key if key is NotImplemented else self.id > key

    def __ge__(self, other) -> bool:
        key = self._key(other)
        return key if key is NotImplemented else self.id >= key

    def __hash__(self) -> int:
        return hash(self.id)


class _Scanner:
    """Reads whitespace-separated fields and whole lines from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in string.whitespace:
            self._pos += 1

    def exhausted(self) -> bool:
        self._skip_space()
        return self._pos >= len(self._text)

    def _match(self, pattern: "re.Pattern[str]", what: str) -> str:
        self._skip_space()
        found = pattern.match(self._text, self._pos)
        if found is None:
            raise ValueError(f"expected {what} at offset {self._pos}")
        self._pos = found.end()
        return found.group()

    def integer(self, what: str) -> int:
        return int(self._match(_INT, what))

    def number(self, what: str) -> float:
        return float(self._match(_FLOAT, what))

    def word(self, what: str, limit: int) -> str:
        value = self._match(_WORD, what)
        if len(value) > limit:
            raise ValueError(f"{what} longer than {limit} characters")
        return value

    def char(self, what: str) -> str:
        return self._match(_CHAR, what)

    def skip_one(self) -> None:
        self._pos = min(self._pos + 1, len(self._text))

    def line(self, what: str, limit: int) -> str:
        if self._pos >= len(self._text):
            raise ValueError(f"expected {what} at end of input")
        end = self._text.find("\n", self._pos)
        if end < 0:
            end = len(self._text)
        value = self._text[self._pos:end]
        if len(value) > limit:
            raise ValueError(f"{what} longer than {limit} characters")
        self._pos = min(end + 1, len(self._text))
        return value


def parse_students(text: str) -> List[Student]:
    """Read records: ID line, name line, city line, then the remaining fields."""
    scanner = _Scanner(text)
    students: List[Student] = []
    while not scanner.exhausted():
        student_id = scanner.integer("an ID")
        scanner.skip_one()
        students.append(
            Student(
                id=student_id,
                name=scanner.line("a name", NAME_LIMIT),
                city_state=scanner.line("a city and state", CITY_LIMIT),
                phone=scanner.word("a phone number", PHONE_LIMIT),
                gender=scanner.char("a gender"),
                year=scanner.integer("a year"),
                credits=scanner.integer("a credit count"),
                gpa=scanner.number("a GPA"),
                major=scanner.word("a major", MAJOR_LIMIT),
            )
        )
    return students