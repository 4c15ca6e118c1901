"""Check phrases for being palindromes and classify their punctuation."""

import argparse
import string
import sys
from dataclasses import dataclass
from typing import List

SEPARATOR = "#"
MAX_PHRASE = 79
COLUMN = 25

PLAIN = 1
SPACED = 2
PUNCTUATED = 3


@dataclass(frozen=True)
class Verdict:
    """Letters of a phrase, whether they read the same both ways, and its kind."""

    letters: str
    is_palindrome: bool
    kind: int


def classify(phrase: str) -> Verdict:
    """Classify ``phrase``: kind 3 has punctuation, 2 has spaces, 1 neither."""
    letters = []
    has_space = has_punct = False
    for char in phrase:
        if char in string.ascii_letters:
            letters.append(char.lower())
        elif char in string.whitespace:
            has_space = True
        elif char in string.punctuation:
            has_punct = True
    word = "".join(letters)
    if has_punct:
        kind = PUNCTUATED
    elif has_space:
        kind = SPACED
    else:
        kind = PLAIN
    return Verdict(word, word == word[::-1], kind)


def split_phrases(text: str) -> List[str]:
    """Split ``text`` on ``#``, stopping at an over-long or empty final piece."""
    pieces = text.split(SEPARATOR)
    phrases: List[str] = []
    for position, piece in enumerate(pieces):
        is_last = position == len(pieces) - 1
        if len(piece) > MAX_PHRASE or (is_last and not piece):
            break
        phrases.append(piece)
    return phrases


def format_verdict(verdict: Verdict) -> str:
    """Return the letters backwards, padded to a column, then the verdict."""
    padding = " " * max(COLUMN - len(verdict.letters), 1)
    outcome = f"type {verdict.kind}" if verdict.is_palindrome else "invalid"
    return f"{verdict.letters[::-1]}{padding}{outcome}"


def main(argv=None) -> int:
    """Report on every ``#``-separated phrase in a file."""
    parser = argparse.ArgumentParser(description="Check palindromes.")
    parser.add_argument("path", nargs="?", default="palindromes.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("file not found", file=sys.stderr)
        return 1

    for phrase in split_phrases(text):
        print(format_verdict(classify(phrase)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())