"""Infix to postfix conversion and three-address code generation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_MAX_EXPRESSION = 99
_COLUMN = 9


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def infix_to_postfix(expr: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expr:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            # '^' is right-associative, so it never pops its own kind.
            while stack and ch != "^" and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


@dataclass(frozen=True)
class Quadruple:
    """One line of three-address code: result = arg1 operator arg2."""

    operator: str
    arg1: str
    arg2: str
    result: str


def generate_quadruples(postfix: str) -> list[Quadruple]:
    """Turn a postfix expression into quadruples using temporaries T0, T1, ..."""
    stack: list[str] = []
    quadruples: list[Quadruple] = []
    for ch in postfix:
        if _is_operand(ch):
            stack.append(ch)
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {ch!r} is missing an operand")
        arg2 = stack.pop()
        arg1 = stack.pop()
        result = f"T{len(quadruples)}"
        quadruples.append(Quadruple(ch, arg1, arg2, result))
        stack.append(result)
    return quadruples


def _row(*cells: str) -> str:
    return " ".join(f"{cell:<{_COLUMN}}" for cell in cells)


def format_table(quadruples: Iterable[Quadruple]) -> str:
    """Render quadruples as a fixed-width table with a header."""
    lines = [_row("Operator", "Arg1", "Arg2", "Result"), "-" * 48]
    lines.extend(_row(q.operator, q.arg1, q.arg2, q.result) for q in quadruples)
    return "\n".join(lines)


def _read_word(prompt: str) -> str:
    try:
        line = input(prompt)
    except EOFError:
        return ""
    words = line.split()
    return words[0] if words else ""


def main(argv: list[str] | None = None) -> int:
    """Read an infix expression and print its postfix form and quadruples."""
    parser = argparse.ArgumentParser(
        prog="intermediate",
        description="Generate three-address code for an infix expression.",
    )
    parser.add_argument("expression", nargs="?", help="infix expression")
    args = parser.parse_args(argv)

    text = args.expression
    if text is None:
        text = _read_word("Enter an infix expression: ")
    if not text:
        print("error: no expression given", file=sys.stderr)
        return 1

    postfix = infix_to_postfix(text[:_MAX_EXPRESSION])
    print(f"Postfix expression: {postfix}")
    try:
        quadruples = generate_quadruples(postfix)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("\nIntermediate code:")
    print(format_table(quadruples))
    return 0