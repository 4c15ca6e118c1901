"""Evaluate integer expressions written in reverse Polish notation."""

import argparse
import re
import string
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from coursekit.stack import Stack, StackEmptyError, StackFullError

END_TOKEN = ";"
TOO_MANY = "too many operands"
NOT_ENOUGH = "not enough operands"

_LEADING_DIGITS = re.compile(r"\d+")


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _truncating_mod(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


_OPERATORS = {
    "*": lambda a, b: a * b,
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "/": _truncating_div,
    "%": _truncating_mod,
}


@dataclass(frozen=True)
class Evaluation:
    """Outcome of one expression: its tokens, per-token trace and result."""

    tokens: Tuple[str, ...]
    steps: Tuple[str, ...]
    result: Optional[int]
    error: Optional[str]
    terminated: bool

    @property
    def valid(self) -> bool:
        return self.error is None


def _push_number(token: str, stack: Stack) -> str:
    number = int(_LEADING_DIGITS.match(token).group())
    try:
        stack.push(number)
    except StackFullError:
        # A full stack drops the value but the step is still reported.
        pass
    return f"Push {number}"


def _apply(operator: str, stack: Stack) -> Optional[str]:
    action = _OPERATORS.get(operator)
    if action is None:
        raise ValueError(f"unknown operator {operator!r}")
    try:
        right = stack.pop()
        left = stack.pop()
    except StackEmptyError:
        return None
    result = action(left, right)
    stack.push(result)
    return f"Pop  {right}\tPop  {left}\tPush {result}"


def evaluate(tokens: Iterable[str]) -> Evaluation:
    """Evaluate one expression; a final ``;`` token closes it."""
    tokens = tuple(tokens)
    stack = Stack()
    steps: List[str] = []
    valid = True
    terminated = False

    for position, token in enumerate(tokens):
        if not token:
            raise ValueError("empty token")
        if token[0] == END_TOKEN:
            if position != len(tokens) - 1:
                raise ValueError("';' must be the last token of an expression")
            terminated = True
            break
        if not valid:
            steps.append("")
        elif token[0] in string.digits:
            steps.append(_push_number(token, stack))
        elif token[0] in string.punctuation:
            step = _apply(token[0], stack)
            if step is None:
                valid = False
                steps.append("")
            else:
                steps.append(step)
        else:
            steps.append("")

    result: Optional[int] = None
    error: Optional[str] = None
    if not valid:
        error = NOT_ENOUGH
    elif terminated:
        if len(stack) == 1:
            result = stack.pop()
        elif len(stack) > 1:
            error = TOO_MANY
    return Evaluation(tokens, tuple(steps), result, error, terminated)


def split_expressions(text: str) -> List[List[str]]:
    """Split whitespace-separated tokens into expressions ending at ``;``."""
    expressions: List[List[str]] = []
    current: List[str] = []
    for token in text.split():
        current.append(token)
        if token[0] == END_TOKEN:
            expressions.append(current)
            current = []
    if current:
        expressions.append(current)
    return expressions


def evaluate_text(text: str) -> List[Evaluation]:
    """Evaluate every expression found in ``text``."""
    return [evaluate(tokens) for tokens in split_expressions(text)]


def _summary(evaluation: Evaluation) -> str:
    if evaluation.result is not None:
        return (
            f"Pop  {evaluation.result}\n\t\tValid:  result = {evaluation.result}\n\n"
        )
    if evaluation.error is not None:
        return f"\n\t\tInvalid RPN expression - {evaluation.error}\n\n"
    return ""


def format_trace(evaluation: Evaluation) -> str:
    """Return the step-by-step report written for one expression."""
    body = evaluation.tokens[:-1] if evaluation.terminated else evaluation.tokens
    parts = [
        f"\n(Token: {token})\t\t{step}" for token, step in zip(body, evaluation.steps)
    ]
    if evaluation.terminated:
        parts.append(f"\n(Token: {evaluation.tokens[-1]})\t\t{_summary(evaluation)}")
    return "".join(parts)


def _echo(evaluation: Evaluation) -> None:
    body = evaluation.tokens[:-1] if evaluation.terminated else evaluation.tokens
    sys.stdout.write("".join(f"{token} " for token in body))
    if not evaluation.terminated:
        return
    if evaluation.result is not None:
        sys.stdout.write(f"= {evaluation.result}\n")
    elif evaluation.error is not None:
        sys.stdout.flush()
        sys.stderr.write("\t\tinvalid\n")
        sys.stderr.flush()


def main(argv=None) -> int:
    """Evaluate a file of expressions, echoing results and writing a trace."""
    parser = argparse.ArgumentParser(description="Evaluate RPN expressions.")
    parser.add_argument("expressions", nargs="?", default="expressions.txt")
    parser.add_argument("results", nargs="?", default="results.txt")
    args = parser.parse_args(argv)

    try:
        with open(args.expressions, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"cannot read {args.expressions}: {exc}", file=sys.stderr)
        return 1

    evaluations = evaluate_text(text)
    with open(args.results, "w", encoding="utf-8") as out:
        for evaluation in evaluations:
            out.write(format_trace(evaluation))
    for evaluation in evaluations:
        _echo(evaluation)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())