import pytest
from shunt.__main__ import eval_main, main
from shunt.pipeline import calculate, convert
from shunt.types import render_sequence


# --- Pipeline ---

def test_convert_returns_snapshot_and_postfix():
    infix, postfix = convert("(3+4)*2")
    assert render_sequence(infix) == "( 3 + 4 ) * 2 "
    assert render_sequence(postfix) == "3 4 + 2 * "


@pytest.mark.parametrize("src, expected", [
    ("3+4*2", 11),
    ("(3+4)*2", 14),
    ("2^3^2", 512),
    ("8/4/2", 1),
    ("-5+3", -8),
])
def test_calculate(src, expected):
    assert calculate(src) == expected


# --- shunt ---

def test_shunt_prints_both_stages(capsys):
    assert main(["3+4*2"]) == 0
    out = capsys.readouterr().out
    assert out == "input:  3 + 4 * 2 \noutput: 3 4 2 * + \n"


def test_shunt_does_not_evaluate(capsys):
    assert main(["1/0"]) == 0
    assert "result" not in capsys.readouterr().out


def test_shunt_unmatched_paren(capsys):
    assert main(["1+2)"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "input:  1 + 2 ) \n"
    assert "Unmatched closing parenthesis." in captured.err


def test_shunt_rejects_whitespace(capsys):
    assert main(["1 + 2"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unexpected character ' '" in captured.err


def test_shunt_usage(capsys):
    assert main([]) == 1
    assert "Usage: shunt <expression>" in capsys.readouterr().err
    assert main(["1", "2"]) == 1


def test_shunt_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["shunt", "1+2"])
    assert main() == 0
    assert "output: 1 2 + \n" in capsys.readouterr().out


# --- shunteval ---

def test_shunteval_unary_quirk(capsys):
    assert eval_main(["-5+3"]) == 0
    out = capsys.readouterr().out
    assert out == "input:  (-) 5 + 3 \noutput: 5 3 + (-) \nresult: -8\n"


def test_shunteval_result_wraps_at_64_bits(capsys):
    assert eval_main(["4294967296*4294967295"]) == 0
    assert capsys.readouterr().out.endswith("result: -4294967296\n")


def test_shunteval_large_result(capsys):
    assert eval_main(["2^40"]) == 0
    assert capsys.readouterr().out.endswith("result: 1099511627776\n")


def test_shunteval_division_by_zero(capsys):
    assert eval_main(["1/0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "input:  1 / 0 \noutput: 1 0 / \n"
    assert "Division by zero." in captured.err


def test_shunteval_stack_empty(capsys):
    assert eval_main(["+5"]) == 1
    assert "Stack empty." in capsys.readouterr().err


def test_shunteval_usage(capsys):
    assert eval_main([]) == 1
    assert "Usage: shunteval <expression>" in capsys.readouterr().err
