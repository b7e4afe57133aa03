import pytest

from compilerlab.lexer import KEYWORDS, Token, TokenKind, is_keyword, main, tokenize


def kinds_and_texts(text):
    return [(t.kind, t.text) for t in tokenize(text)]


def test_is_keyword():
    assert all(is_keyword(word) for word in KEYWORDS)
    assert is_keyword("int") is True
    assert is_keyword("printf") is False
    assert is_keyword("Int") is False


def test_declaration():
    assert kinds_and_texts("int x = 10;\n") == [
        (TokenKind.KEYWORD, "int"),
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.ASSIGNMENT, "="),
        (TokenKind.NUMBER, "10"),
        (TokenKind.SYMBOL, ";"),
    ]


def test_symbols_and_keywords():
    assert kinds_and_texts("int main() {\n") == [
        (TokenKind.KEYWORD, "int"),
        (TokenKind.KEYWORD, "main"),
        (TokenKind.SYMBOL, "("),
        (TokenKind.SYMBOL, ")"),
        (TokenKind.SYMBOL, "{"),
    ]


def test_two_character_operators():
    ops = [t.text for t in tokenize("a<=b<>c>=d==e i++ j--\n") if t.kind is TokenKind.OPERATOR]
    assert ops == ["<=", "<>", ">=", "==", "++", "--"]


def test_single_character_operators_reprocess_next_char():
    assert kinds_and_texts("x<y\n") == [
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.OPERATOR, "<"),
        (TokenKind.IDENTIFIER, "y"),
    ]
    ops = [t.text for t in tokenize("a>b c+d e-f g/h k*l m%n\n") if t.kind is TokenKind.OPERATOR]
    assert ops == [">", "+", "-", "/", "*", "%"]


def test_comment_is_skipped():
    assert kinds_and_texts("x // int y\nreturn\n") == [
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.KEYWORD, "return"),
    ]


@pytest.mark.parametrize("literal", ["3.14", "5.", "0.5"])
def test_floats(literal):
    assert kinds_and_texts(literal + "\n") == [(TokenKind.FLOAT, literal)]


def test_invalid_identifier():
    assert kinds_and_texts("9lives;\n") == [
        (TokenKind.INVALID_IDENTIFIER, "9lives"),
        (TokenKind.SYMBOL, ";"),
    ]


def test_open_token_at_end_is_dropped():
    assert list(tokenize("abc")) == []
    assert list(tokenize("<")) == []


def test_unknown_characters_are_skipped():
    assert kinds_and_texts("a ! @ b\n") == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.IDENTIFIER, "b"),
    ]


def test_long_identifier_is_truncated():
    tokens = list(tokenize("a" * 60 + " "))
    assert tokens == [Token(TokenKind.IDENTIFIER, "a" * 49)]


def test_long_number_drops_the_point():
    tokens = list(tokenize("1" * 48 + ". "))
    assert tokens == [Token(TokenKind.NUMBER, "1" * 48)]


def test_token_str():
    assert str(Token(TokenKind.KEYWORD, "int")) == "Keyword: int"
    assert str(Token(TokenKind.INVALID_IDENTIFIER, "9x")).startswith(
        "Error: Invalid identifier starting with digit: "
    )


def test_main_prints_tokens(tmp_path, capsys):
    source = "int a = 3.5;\nif (a >= b) return a;\n"
    path = tmp_path / "prog.txt"
    path.write_text(source)
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(t) for t in tokenize(source)]


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing)]) == 1
    assert str(missing) in capsys.readouterr().err