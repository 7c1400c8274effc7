"""Operation order: evaluate expressions under unusual precedence rules."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_INPUT = Path("data/day18.txt")
_OPERATORS = {"+": operator.add, "*": operator.mul}
_DIGITS = frozenset("0123456789")
_MIRROR = str.maketrans("()", ")(")


def reverse_expression(line: str) -> str:
    """Drop spaces, reverse the text and swap the parentheses."""
    return line.replace(" ", "")[::-1].translate(_MIRROR)


def _close_group(stack: list[str], queue: list[str]) -> None:
    while stack:
        token = stack.pop()
        if token == "(":
            return
        queue.append(token)
    raise ValueError("unbalanced parentheses")


def _finish(stack: list[str], queue: list[str]) -> list[str]:
    if "(" in stack:
        raise ValueError("unbalanced parentheses")
    queue.extend(reversed(stack))
    return queue


def _check_digit(ch: str) -> None:
    if ch not in _DIGITS:
        raise ValueError(f"unexpected character in expression: {ch!r}")


def shunting_yard(expression: str) -> list[str]:
    """Postfix tokens of a reversed expression with equal precedence."""
    stack: list[str] = []
    queue: list[str] = []
    for ch in expression:
        if ch in _OPERATORS or ch == "(":
            stack.append(ch)
        elif ch == ")":
            _close_group(stack, queue)
        else:
            _check_digit(ch)
            queue.append(ch)
    return _finish(stack, queue)


def shunting_yard_with_precedence(expression: str) -> list[str]:
    """Postfix tokens of a reversed expression where + binds tighter than *."""
    stack: list[str] = []
    queue: list[str] = []
    for ch in expression:
        if ch in _OPERATORS:
            if stack and stack[-1] == "+":
                queue.append(stack.pop())
            stack.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            _close_group(stack, queue)
        else:
            _check_digit(ch)
            queue.append(ch)
    return _finish(stack, queue)


def evaluate(tokens: Iterable[str]) -> int:
    """Evaluate postfix tokens."""
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        left = stack.pop()
        right = stack.pop()
        stack.append(apply(left, right))
    if len(stack) != 1:
        raise ValueError("malformed expression")
    return stack[0]


def evaluate_line(line: str, addition_first: bool) -> int:
    """Evaluate left to right, optionally giving + precedence over *."""
    algorithm = shunting_yard_with_precedence if addition_first else shunting_yard
    return evaluate(algorithm(reverse_expression(line)))


def _read_input(argv: Sequence[str] | None) -> str:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else DEFAULT_INPUT
    try:
        return path.read_text()
    except OSError as exc:
        raise SystemExit(f"failed opening file: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    lines = [line for line in _read_input(argv).splitlines() if line.strip()]
    print(f"Part1: {sum(evaluate_line(line, addition_first=False) for line in lines)}")
    print(f"Part2: {sum(evaluate_line(line, addition_first=True) for line in lines)}")


if __name__ == "__main__":
    main()