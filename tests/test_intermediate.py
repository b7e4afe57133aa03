import pytest

from compilerlab.intermediate import (
    Quadruple,
    format_table,
    generate_quadruples,
    infix_to_postfix,
    main,
    precedence,
)


def test_precedence_ordering():
    assert precedence("+") == precedence("-")
    assert precedence("*") == precedence("/")
    assert precedence("*") > precedence("+")
    assert precedence("^") > precedence("*")
    assert precedence("(") < precedence("+")


def test_infix_to_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_to_postfix_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


@pytest.mark.parametrize("expr", ["a+b-c", "(a+b)*(c-d)/e", "x^y^z", "a*(b+c)"])
def test_postfix_keeps_operands_in_order(expr):
    postfix = infix_to_postfix(expr)
    operands = [ch for ch in expr if ch.isalnum()]
    assert [ch for ch in postfix if ch.isalnum()] == operands
    assert "(" not in postfix and ")" not in postfix
    assert sorted(postfix) == sorted(ch for ch in expr if ch not in "()")


def test_power_is_right_associative():
    quads = generate_quadruples(infix_to_postfix("a^b^c"))
    assert quads[0].arg1 == "b"
    assert quads[0].arg2 == "c"
    assert quads[1].arg1 == "a"
    assert quads[1].arg2 == quads[0].result


def test_generate_single_quadruple():
    assert generate_quadruples("ab+") == [Quadruple("+", "a", "b", "T0")]


def test_temporaries_are_numbered_in_order():
    quads = generate_quadruples(infix_to_postfix("a+b*c-d/e"))
    assert len(quads) == 4
    assert [q.result for q in quads] == [f"T{i}" for i in range(len(quads))]
    used = {q.arg1 for q in quads} | {q.arg2 for q in quads}
    assert all(q.result in used for q in quads[:-1])


def test_operand_only_has_no_code():
    assert generate_quadruples("a") == []


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        generate_quadruples("a+")


def test_format_table_layout():
    quads = generate_quadruples("ab*")
    lines = format_table(quads).splitlines()
    assert lines[0].split() == ["Operator", "Arg1", "Arg2", "Result"]
    assert set(lines[1]) == {"-"}
    assert len(lines) == len(quads) + 2
    assert lines[2].split() == [quads[0].operator, "a", "b", quads[0].result]


def test_main_prints_postfix_and_table(capsys):
    assert main(["a+b*c"]) == 0
    out = capsys.readouterr().out
    assert f"Postfix expression: {infix_to_postfix('a+b*c')}" in out
    assert "Intermediate code:" in out
    assert format_table(generate_quadruples(infix_to_postfix("a+b*c"))) in out