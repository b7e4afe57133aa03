"""FIRST and FOLLOW sets for grammars with single-character symbols.

Nonterminals are upper-case letters, ``#`` stands for epsilon and ``$``
marks the end of input.
"""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterable, Iterator

EPSILON = "#"
END_MARKER = "$"


def parse_production(text: str) -> tuple[str, str]:
    """Split ``"E->TR"`` into head and body; the two characters after the head are the arrow."""
    if len(text) < 3:
        raise ValueError(f"malformed production: {text!r}")
    return text[0], text[3:]


def _is_nonterminal(symbol: str) -> bool:
    return "A" <= symbol <= "Z"


def _add(result: list[str], symbol: str) -> None:
    if symbol not in result:
        result.append(symbol)


class Grammar:
    """A list of productions, the first of which names the start symbol."""

    def __init__(self, productions: Iterable[tuple[str, str]]) -> None:
        self.productions: list[tuple[str, str]] = []
        for head, body in productions:
            if len(head) != 1:
                raise ValueError(f"production head must be one symbol: {head!r}")
            self.productions.append((head, body))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Grammar:
        """Build a grammar from lines such as ``"E->TR"``."""
        return cls(parse_production(line) for line in lines)

    def nonterminals(self) -> list[str]:
        """Production heads in order of first appearance."""
        return list(dict.fromkeys(head for head, _ in self.productions))

    def first(self, symbol: str) -> list[str]:
        """FIRST set of ``symbol``, in order of discovery."""
        return self._first(symbol, frozenset())

    def _first(self, symbol: str, active: frozenset[str]) -> list[str]:
        if not _is_nonterminal(symbol) and symbol != EPSILON:
            return [symbol]
        if symbol in active:
            raise ValueError(f"left recursion through {symbol!r}")
        active = active | {symbol}
        result: list[str] = []
        for head, body in self.productions:
            if head != symbol or not body:
                continue
            if body[0] == EPSILON:
                _add(result, EPSILON)
                continue
            for part in body:
                sub = self._first(part, active)
                for item in sub:
                    if item != EPSILON:
                        _add(result, item)
                if EPSILON not in sub:
                    break
            else:
                _add(result, EPSILON)
        return result

    def follow(self, symbol: str) -> list[str]:
        """FOLLOW set of ``symbol``, in order of discovery."""
        result: list[str] = []
        self._follow_into(result, symbol, frozenset())
        return result

    def _follow_into(self, result: list[str], symbol: str, active: frozenset[str]) -> None:
        if symbol in active:
            raise ValueError(f"cyclic FOLLOW dependency through {symbol!r}")
        active = active | {symbol}
        if self.productions and self.productions[0][0] == symbol:
            _add(result, END_MARKER)
        for head, body in self.productions:
            for index, part in enumerate(body):
                if part != symbol:
                    continue
                if index + 1 < len(body):
                    for item in self.first(body[index + 1]):
                        if item != EPSILON:
                            _add(result, item)
                        else:
                            self._follow_into(result, head, active)
                elif head != symbol:
                    self._follow_into(result, head, active)


def _format_set(label: str, symbol: str, items: Iterable[str]) -> str:
    return f"{label}({symbol}) = {{ " + "".join(f"{item}, " for item in items) + "}"


def _stdin_words() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _read_productions() -> list[str]:
    print("Enter the number of productions: ", end="", flush=True)
    words = _stdin_words()
    try:
        count = int(next(words))
    except (StopIteration, ValueError) as exc:
        raise ValueError("expected the number of productions") from exc
    print(f"Enter {count} productions (use ->, epsilon as #):")
    lines = list(itertools.islice(words, count))
    if len(lines) < count:
        raise ValueError(f"expected {count} productions, got {len(lines)}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print FIRST and FOLLOW sets for productions given as arguments or on input."""
    parser = argparse.ArgumentParser(
        prog="first-follow", description="Compute FIRST and FOLLOW sets."
    )
    parser.add_argument("productions", nargs="*", help="productions such as E->TR")
    args = parser.parse_args(argv)

    try:
        lines = args.productions or _read_productions()
        grammar = Grammar.from_lines(lines)
        nonterminals = grammar.nonterminals()
        firsts = [(nt, grammar.first(nt)) for nt in nonterminals]
        follows = [(nt, grammar.follow(nt)) for nt in nonterminals]
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("\nFIRST sets:")
    for nt, items in firsts:
        print(_format_set("FIRST", nt, items))
    print("\nFOLLOW sets:")
    for nt, items in follows:
        print(_format_set("FOLLOW", nt, items))
    return 0