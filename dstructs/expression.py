"""Bracket balance checking and infix to postfix conversion."""

from __future__ import annotations

OPERATORS = frozenset("+-*/%^")
OPENING = {")": "(", "}": "{", "]": "["}
_OPEN_BRACKETS = frozenset(OPENING.values())
_CLOSE_BRACKETS = frozenset(OPENING)

_PRIORITY = {
    "(": 0,
    "{": 0,
    "[": 0,
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "%": 2,
    "^": 3,
}


def is_balanced(expression: str) -> bool:
    """Whether every (, { and [ in expression is closed by its match, in order."""
    stack: list[str] = []
    for ch in expression:
        if ch in _OPEN_BRACKETS:
            stack.append(ch)
        elif ch in _CLOSE_BRACKETS:
            if not stack or stack.pop() != OPENING[ch]:
                return False
    return not stack


def priority(op: str) -> int:
    """Precedence of an operator or opening bracket: brackets 0, + - 1, * / % 2, ^ 3."""
    try:
        return _PRIORITY[op]
    except KeyError:
        raise ValueError(f"no priority for {op!r}") from None


def is_operator(ch: str) -> bool:
    """Whether ch is one of + - * / % ^."""
    return ch in OPERATORS


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of non-negative integers to postfix.

    Tokens in the result are separated by single spaces. All operators,
    ``^`` included, associate to the left. Raises ValueError if the brackets
    are unbalanced or the expression holds a character it cannot handle.
    """
    if not is_balanced(expression):
        raise ValueError(f"unbalanced brackets in {expression!r}")

    output: list[str] = []
    operators: list[str] = []
    number: list[str] = []

    def flush_number() -> None:
        if number:
            output.append("".join(number))
            number.clear()

    for ch in expression:
        if ch.isdigit():
            number.append(ch)
            continue
        flush_number()
        if ch.isspace():
            continue
        if is_operator(ch):
            rank = priority(ch)
            while (
                operators
                and operators[-1] not in _OPEN_BRACKETS
                and rank <= priority(operators[-1])
            ):
                output.append(operators.pop())
            operators.append(ch)
        elif ch in _OPEN_BRACKETS:
            operators.append(ch)
        elif ch in _CLOSE_BRACKETS:
            opening = OPENING[ch]
            while operators[-1] != opening:
                output.append(operators.pop())
            operators.pop()
        else:
            raise ValueError(f"unexpected character {ch!r} in expression")
    flush_number()

    while operators:
        output.append(operators.pop())
    return " ".join(output)