# compilerlab

Small, self-contained tools for the classic stages of a compiler front end.
Everything works on plain strings and uses only the standard library.

## Modules

### `compilerlab.lexer`

`tokenize(text)` yields `Token` objects for a small C-like language. Each
token has a `kind` (a `TokenKind`) and its `text`; `str(token)` gives lines
such as `Keyword: int` or `Operator: <=`.

- Keywords: `int`, `float`, `if`, `else`, `while`, `return`, `main`
  (`is_keyword(word)` checks one).
- Identifiers, integer numbers (`Number`) and numbers with a fractional part
  (`Float`).
- Operators `<`, `<=`, `<>`, `>`, `>=`, `==`, `+`, `++`, `-`, `--`, `*`,
  `%`, `/`; a lone `=` is an `Assignment Operator`.
- Symbols `; { } ( ) , .`.
- `//` starts a comment that runs to the end of the line.
- A word that starts with a digit and continues with letters or `_` is
  reported as `Error: Invalid identifier starting with digit: ...`.

Words are cut to 49 characters, unknown characters are skipped, and a token
that is still open when the text ends is not reported (end input with a
newline to see the last token).

### `compilerlab.first_follow`

`Grammar` computes FIRST and FOLLOW sets for a grammar of single-character
symbols. Productions are written as `E->TR`: upper-case letters are
nonterminals, `#` stands for epsilon and `$` marks the end of input. The
head of the first production is the start symbol.

- `parse_production("E->TR")` returns `("E", "TR")`.
- `Grammar(productions)` takes `(head, body)` pairs;
  `Grammar.from_lines(lines)` takes strings such as `"E->TR"`.
- `grammar.nonterminals()` lists production heads in order of appearance.
- `grammar.first(symbol)` and `grammar.follow(symbol)` return the sets as
  lists, in the order the symbols were found.

Left-recursive grammars, and FOLLOW sets that depend on each other in a
cycle, raise `ValueError`.

### `compilerlab.recursive_descent`

`is_valid_expression(text)` (or `ExpressionValidator(text).validate()`)
checks an expression against the grammar

```
E  -> T E'
E' -> (+|-) T E' | ε
T  -> F T'
T' -> (*|/) F T' | ε
F  -> (E) | id
```

where an `id` is a single letter or digit. The whole text must match.

### `compilerlab.shift_reduce`

`parse(text)` shifts each character onto a stack, reducing after every
shift, and returns a `ParseResult` with the `steps` taken (each a `Step`
whose `str()` is e.g. `Shift: E+b`), the final `stack` and whether the input
was `accepted` (reduced to a single `E`). `reduce(stack)` applies one round
of reductions: ids become `E`, then `(E)` becomes `E`, then `E op E`
becomes `E` for `+ - * /`.

### `compilerlab.intermediate`

- `precedence(op)` gives `+ -` 1, `* /` 2, `^` 3 and anything else 0.
- `infix_to_postfix(expr)` converts an infix expression with
  single-character operands to postfix; `^` is right-associative.
- `generate_quadruples(postfix)` returns `Quadruple(operator, arg1, arg2,
  result)` entries with temporaries `T0`, `T1`, ...; an operator without two
  operands raises `ValueError`.
- `format_table(quadruples)` renders them as a fixed-width table.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library use

```python
from compilerlab.intermediate import infix_to_postfix, generate_quadruples, format_table
from compilerlab.recursive_descent import is_valid_expression
from compilerlab.first_follow import Grammar
from compilerlab.lexer import tokenize
from compilerlab.shift_reduce import parse

postfix = infix_to_postfix("a+b*c")        # "abc*+"
print(format_table(generate_quadruples(postfix)))

is_valid_expression("(a+b)*c")             # True
is_valid_expression("a+*b")                # False

grammar = Grammar.from_lines(["E->TR", "R->+TR", "R->#", "T->i"])
for symbol in grammar.nonterminals():
    print(symbol, grammar.first(symbol), grammar.follow(symbol))

for token in tokenize("int x = 42; // answer\n"):
    print(token)                            # e.g. "Keyword: int"

parse("a+b-c").accepted                    # True
```

## Commands

Each tool also runs from the command line. Where the input is not given as
an argument, the command prompts for it on standard input.

| Command                                 | What it does                                          |
|-----------------------------------------|-------------------------------------------------------|
| `compilerlab-lex [PATH]`                | Prints the tokens of a file (default `input.txt`)     |
| `compilerlab-first-follow [PROD ...]`   | Prints FIRST and FOLLOW sets of the productions       |
| `compilerlab-validate [EXPRESSION]`     | Reports whether an expression is valid                |
| `compilerlab-shift-reduce [TEXT]`       | Prints the shift-reduce steps and the final verdict   |
| `compilerlab-intermediate [EXPRESSION]` | Prints the postfix form and a quadruple table         |

When `compilerlab-first-follow` reads from standard input, it expects the
number of productions first, then the productions themselves, separated by
whitespace.

## Limits

These are teaching tools, not a compiler: there is no symbol table, no
syntax tree and no code generation beyond the quadruple table. Expressions
in the parsers and the code generator use single-character operands only,
and the shift-reduce parser is a simple pattern reducer rather than a
table-driven LR parser.