"""Compiler front-end tools: a lexer, FIRST/FOLLOW sets, recursive-descent and shift-reduce parsing, and three-address code."""

__version__ = "0.1.0"