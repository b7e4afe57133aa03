"""A simple shift-reduce recogniser for expressions over single-character ids."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

_OPERATORS = frozenset("+-*/")


@dataclass(frozen=True)
class Step:
    """One parsing step and the stack contents after it."""

    action: str
    stack: tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.action}: {''.join(self.stack)}"


@dataclass(frozen=True)
class ParseResult:
    steps: tuple[Step, ...]
    stack: tuple[str, ...]
    accepted: bool


def reduce(stack: Sequence[str]) -> list[str]:
    """Apply one round of reductions and return the new stack.

    Every id becomes E, then each (E) becomes E, then each E op E becomes E,
    scanning left to right once per rule.
    """
    items = ["E" if item[:1].isascii() and item[:1].isalnum() else item for item in stack]

    index = 0
    while index <= len(items) - 3:
        if items[index : index + 3] == ["(", "E", ")"]:
            items[index : index + 3] = ["E"]
        index += 1

    index = 0
    while index <= len(items) - 3:
        left, op, right = items[index : index + 3]
        if left == "E" and op in _OPERATORS and right == "E":
            items[index : index + 3] = ["E"]
        index += 1

    return items


def parse(text: str) -> ParseResult:
    """Shift each character of ``text``, reducing after every shift."""
    stack: list[str] = []
    steps: list[Step] = []
    for ch in text:
        stack.append(ch)
        steps.append(Step("Shift", tuple(stack)))
        stack = reduce(stack)
        steps.append(Step("Reduce", tuple(stack)))
    stack = reduce(stack)
    return ParseResult(tuple(steps), tuple(stack), stack == ["E"])


def main(argv: list[str] | None = None) -> int:
    """Print the shift-reduce steps for an input string and the verdict."""
    parser = argparse.ArgumentParser(
        prog="shift-reduce", description="Recognise an expression by shift-reduce parsing."
    )
    parser.add_argument("text", nargs="?", help="input string such as a+b-c")
    args = parser.parse_args(argv)

    text = args.text
    if text is None:
        try:
            words = input("Enter the input string (like a+b-c): ").split()
        except EOFError:
            words = []
        if not words:
            print("error: no input given", file=sys.stderr)
            return 1
        text = words[0]

    result = parse(text)
    print("\nSHIFT-REDUCE Parsing Steps:")
    for step in result.steps:
        print(step)
    print("\nString accepted." if result.accepted else "\nString rejected.")
    return 0