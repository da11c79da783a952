"""Evaluate single-digit reverse Polish notation expressions."""

from __future__ import annotations

import sys

_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("+-*/")


class RPNError(Exception):
    """Raised when an expression is malformed."""


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    # Dividing by zero leaves the left operand unchanged.
    return _truncating_div(left, right) if right else left


def evaluate(expression: str) -> int:
    """Return the value of an RPN expression of digits and ``+ - * /``."""
    for char in expression:
        if char not in _DIGITS and char not in _OPERATORS and char != " ":
            raise RPNError(f"wrong argument => {char}")
    tokens = expression.replace(" ", "")
    if len(tokens) < 3:
        raise RPNError("wrong input size")

    stack: list[int] = []
    pos = 0
    while pos < len(tokens):
        while pos < len(tokens) and tokens[pos] in _DIGITS:
            stack.append(int(tokens[pos]))
            pos += 1
        if len(stack) < 2:
            raise RPNError("with operators")
        acc = stack.pop()
        while pos < len(tokens) and tokens[pos] not in _DIGITS:
            if not stack:
                raise RPNError("with operators")
            acc = _apply(tokens[pos], stack.pop(), acc)
            pos += 1
        stack.append(acc)
    if len(stack) > 1:
        raise RPNError("with operators")
    return stack[-1]


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Error: 1 arg needed", file=sys.stderr)
        return 1
    try:
        result = evaluate(args[0])
    except RPNError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())