"""Recursive-descent validator for arithmetic expressions.

Grammar::

    E  -> T E'
    E' -> (+|-) T E' | epsilon
    T  -> F T'
    T' -> (*|/) F T' | epsilon
    F  -> ( E ) | id
"""

from __future__ import annotations

import argparse
import sys

_MAX_INPUT = 127


class ExpressionValidator:
    """Checks whether a string is a well-formed expression."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    def _peek(self) -> str:
        return self.text[self.position] if self.position < len(self.text) else ""

    def _accept(self, choices: str) -> bool:
        ch = self._peek()
        if ch and ch in choices:
            self.position += 1
            return True
        return False

    def _expression(self) -> bool:
        return self._term() and self._expression_tail()

    def _expression_tail(self) -> bool:
        if self._accept("+-"):
            return self._term() and self._expression_tail()
        return True

    def _term(self) -> bool:
        return self._factor() and self._term_tail()

    def _term_tail(self) -> bool:
        if self._accept("*/"):
            return self._factor() and self._term_tail()
        return True

    def _factor(self) -> bool:
        if self._accept("("):
            return self._expression() and self._accept(")")
        ch = self._peek()
        if ch.isascii() and ch.isalnum():
            self.position += 1
            return True
        return False

    def validate(self) -> bool:
        """Return True if the whole text matches the grammar."""
        self.position = 0
        return self._expression() and self.position == len(self.text)


def is_valid_expression(text: str) -> bool:
    """Return True if ``text`` is a valid expression."""
    return ExpressionValidator(text).validate()


def main(argv: list[str] | None = None) -> int:
    """Validate an expression given on the command line or read from input."""
    parser = argparse.ArgumentParser(
        prog="recursive-descent", description="Validate an arithmetic expression."
    )
    parser.add_argument("expression", nargs="?", help="expression to validate")
    args = parser.parse_args(argv)

    text = args.expression
    if text is None:
        try:
            words = input("Enter Expression to Validate: ").split()
        except EOFError:
            words = []
        if not words:
            print("error: no expression given", file=sys.stderr)
            return 1
        text = words[0]

    if is_valid_expression(text[:_MAX_INPUT]):
        print("Expression is Valid.")
    else:
        print("Expression is Invalid.")
    return 0