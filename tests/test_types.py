import dataclasses

import pytest
from shunt.types import (
    BinaryOperator, Number, Operator, Paren, Parenthesis, Unary, UnaryOperator,
    is_right_assoc, precedence, render, render_sequence, wrap_int64,
)


def test_precedence_table():
    assert precedence(Operator.ADD) == precedence(Operator.SUB) == 0
    assert precedence(Operator.MUL) == precedence(Operator.DIV) == 1
    assert precedence(Operator.POW) == 2


def test_only_pow_is_right_assoc():
    assert [op for op in Operator if is_right_assoc(op)] == [Operator.POW]


def test_equal_precedence_equal_assoc():
    for a in Operator:
        for b in Operator:
            if precedence(a) == precedence(b):
                assert is_right_assoc(a) == is_right_assoc(b)


def test_render():
    assert render(Number(-12)) == "-12"
    assert render(BinaryOperator(Operator.POW)) == "^"
    assert render(UnaryOperator(Unary.NEGATE)) == "(-)"
    assert render(Paren(Parenthesis.OPEN)) == "("
    assert render(Paren(Parenthesis.CLOSE)) == ")"


def test_render_not_a_token():
    with pytest.raises(TypeError):
        render("3")


def test_render_sequence():
    seq = [Number(3), Number(4), BinaryOperator(Operator.ADD), UnaryOperator(Unary.NEGATE)]
    assert render_sequence(seq) == "3 4 + (-) "
    assert render_sequence([]) == ""


def test_tokens_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        Number(1).value = 2


def test_wrap_int64():
    assert wrap_int64(5) == 5
    assert wrap_int64(-5) == -5
    assert wrap_int64(2**63) == -(2**63)
    assert wrap_int64(-(2**63) - 1) == 2**63 - 1
    assert wrap_int64(2**64 + 3) == 3
