"""A pair of values of the same kind."""

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass
class Dyad:
    """Two values that can be read together or swapped."""

    first: Any = 0
    second: Any = 0

    def values(self) -> Tuple[Any, Any]:
        """Return both values as a tuple."""
        return self.first, self.second

    def swap(self) -> None:
        """Exchange the two values."""
        self.first, self.second = self.second, self.first


def main(argv=None) -> int:
    """Show int, double and char dyads before and after swapping."""
    for label, dyad, sep in (
        ("int", Dyad(1, 2), ""),
        ("double", Dyad(1.5, 2.5), " "),
        ("char", Dyad("A", "B"), ""),
    ):
        print(f"First {label}{sep}: {dyad.first}")
        print(f"Second {label}: {dyad.second}")
        dyad.swap()
        first, second = dyad.values()
        print(f"\nFirst {label} after swap: {first}")
        print(f"Second {label} after swap: {second}")
        if label != "char":
            print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())