"""A small hand-written lexer for a C-like language."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

KEYWORDS = frozenset({"int", "float", "if", "else", "while", "return", "main"})

_MAX_WORD = 50
_WHITESPACE = " \t\n\v\f\r"
_SYMBOLS = ";{}(),."
# Operators that may be followed by a second character, and which ones.
_FOLLOWERS = {"<": "=>", ">": "=", "=": "=", "+": "+", "-": "-"}


class TokenKind(Enum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    FLOAT = "Float"
    OPERATOR = "Operator"
    ASSIGNMENT = "Assignment Operator"
    SYMBOL = "Symbol"
    INVALID_IDENTIFIER = "Error: Invalid identifier starting with digit"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.text}"


class _State(Enum):
    START = auto()
    WORD = auto()
    NUMBER = auto()
    FRACTION = auto()
    BAD_WORD = auto()
    OPERATOR = auto()
    SLASH = auto()
    COMMENT = auto()


def is_keyword(word: str) -> bool:
    """Return True if ``word`` is a reserved word."""
    return word in KEYWORDS


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_word_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "_"


def tokenize(text: str) -> Iterator[Token]:
    """Yield tokens from ``text``.

    Words are cut to 49 characters. A token still open when the text ends
    is not reported, and unknown characters are skipped.
    """
    limit = _MAX_WORD - 1
    state = _State.START
    word = ""
    prefix = ""

    for ch in text:
        pending = True
        while pending:
            pending = False
            if state is _State.START:
                if ch in _WHITESPACE:
                    pass
                elif ch == "/":
                    state = _State.SLASH
                elif _is_alpha(ch) or ch == "_":
                    word, state = ch, _State.WORD
                elif _is_digit(ch):
                    word, state = ch, _State.NUMBER
                elif ch in _FOLLOWERS:
                    prefix, state = ch, _State.OPERATOR
                elif ch in "*%":
                    yield Token(TokenKind.OPERATOR, ch)
                elif ch in _SYMBOLS:
                    yield Token(TokenKind.SYMBOL, ch)

            elif state is _State.WORD:
                if _is_word_char(ch):
                    if len(word) < limit:
                        word += ch
                else:
                    kind = TokenKind.KEYWORD if is_keyword(word) else TokenKind.IDENTIFIER
                    yield Token(kind, word)
                    state, pending = _State.START, True

            elif state is _State.NUMBER:
                if _is_digit(ch):
                    if len(word) < limit:
                        word += ch
                elif ch == ".":
                    if len(word) < _MAX_WORD - 2:
                        word += "."
                        state = _State.FRACTION
                    else:
                        yield Token(TokenKind.NUMBER, word)
                        state = _State.START
                elif _is_alpha(ch) or ch == "_":
                    state = _State.BAD_WORD
                    if len(word) < limit:
                        word += ch
                else:
                    yield Token(TokenKind.NUMBER, word)
                    state, pending = _State.START, True

            elif state is _State.FRACTION:
                if _is_digit(ch):
                    if len(word) < limit:
                        word += ch
                else:
                    yield Token(TokenKind.FLOAT, word)
                    state, pending = _State.START, True

            elif state is _State.BAD_WORD:
                if _is_word_char(ch):
                    if len(word) < limit:
                        word += ch
                else:
                    yield Token(TokenKind.INVALID_IDENTIFIER, word)
                    state, pending = _State.START, True

            elif state is _State.OPERATOR:
                state = _State.START
                if ch in _FOLLOWERS[prefix]:
                    yield Token(TokenKind.OPERATOR, prefix + ch)
                else:
                    kind = TokenKind.ASSIGNMENT if prefix == "=" else TokenKind.OPERATOR
                    yield Token(kind, prefix)
                    pending = True

            elif state is _State.SLASH:
                if ch == "/":
                    state = _State.COMMENT
                else:
                    yield Token(TokenKind.OPERATOR, "/")
                    state, pending = _State.START, True

            elif state is _State.COMMENT:
                if ch == "\n":
                    state = _State.START


def main(argv: list[str] | None = None) -> int:
    """Print the tokens of a source file, one per line."""
    parser = argparse.ArgumentParser(prog="lexer", description="Tokenize a source file.")
    parser.add_argument("path", nargs="?", default="input.txt", help="file to read")
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"{args.path}: {exc.strerror}", file=sys.stderr)
        return 1

    for token in tokenize(text):
        print(token)
    return 0