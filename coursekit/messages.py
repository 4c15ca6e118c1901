"""Framed messages built from a text, a fill symbol and a repeat count."""

DEFAULT_MESSAGE = "Decide. Commit. Succeed."
DEFAULT_SYMBOL = " "
DEFAULT_COUNT = 10


def format_message(
    msg: str = DEFAULT_MESSAGE,
    symbol: str = DEFAULT_SYMBOL,
    num: int = DEFAULT_COUNT,
) -> str:
    """Return ``msg`` with ``num`` copies of ``symbol`` on each side."""
    if len(symbol) != 1:
        raise ValueError("symbol must be a single character")
    border = symbol * max(num, 0)
    return f"{border}{msg}{border}"


def main(argv=None) -> int:
    """Print the sample messages, using progressively more defaults."""
    lines = (
        format_message("I will decide.", "*", 15),
        format_message("I will commit.", "+"),
        format_message("I will succeed."),
        format_message(),
    )
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())