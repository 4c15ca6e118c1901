"""Pick the larger of two values and describe the choice."""

import sys
from typing import Callable, TypeVar

T = TypeVar("T")

_MAX_LINE = 99


def find_max(a: T, b: T) -> T:
    """Return ``b`` if ``a < b``, otherwise ``a``."""
    return b if a < b else a


def _show(value) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def describe_max(type_name: str, a, b, largest) -> str:
    """Return the report block naming the type, both values and the maximum."""
    return (
        f"\nType: {type_name}"
        f"\nFirst: {_show(a)}"
        f"\nSecond: {_show(b)}"
        f"\nMax: {_show(largest)}"
    )


def _read_char(prompt: str) -> str:
    text = input(prompt).strip()
    if not text:
        raise ValueError("expected a character")
    return text[0]


def _read_line(prompt: str) -> str:
    return input(prompt)[:_MAX_LINE]


def _read_pair(label: str, reader: Callable[[str], object]):
    print(f"\nEnter two {label}")
    first = reader("First: ")
    second = reader("Second: ")
    return first, second


def main(argv=None) -> int:
    """Read pairs of ints, doubles, chars and strings and report each maximum."""
    readers = (
        ("int", "ints", lambda prompt: int(input(prompt))),
        ("double", "doubles", lambda prompt: float(input(prompt))),
        ("char", "chars", _read_char),
        ("char *", "c-strings", _read_line),
    )
    try:
        pairs = [(name, _read_pair(label, reader)) for name, label, reader in readers]
    except (ValueError, EOFError) as exc:
        print(f"\ninvalid input: {exc}", file=sys.stderr)
        return 1

    for name, (a, b) in pairs:
        print(describe_max(name, a, b, find_max(a, b)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())