import io
import sys

import pytest

from dsakit.infix import main, priority, to_postfix


@pytest.mark.parametrize(
    "infix, postfix",
    [
        ("a+b*c", "abc*+"),
        ("(a+b)*c", "ab+c*"),
        ("a+b*c-d/e", "abc*+de/-"),
    ],
)
def test_source_examples(infix, postfix):
    assert to_postfix(infix) == postfix


@pytest.mark.parametrize("infix", ["a+b*c", "(a+b)*(c-d)", "x/(y-z)*4", "1+2+3"])
def test_operand_order_preserved(infix):
    result = to_postfix(infix)
    assert [c for c in result if c.isalnum()] == [c for c in infix if c.isalnum()]


@pytest.mark.parametrize("infix", ["(a+b)*(c-d)", "((a))", "a*(b+(c-d))"])
def test_balanced_parentheses_removed(infix):
    result = to_postfix(infix)
    assert "(" not in result and ")" not in result
    assert len(result) == len(infix) - infix.count("(") - infix.count(")")


def test_single_operand():
    assert to_postfix("z") == "z"


def test_priority_ordering():
    assert priority("*") == priority("/")
    assert priority("+") == priority("-")
    assert priority("*") > priority("+") > priority("(")


def test_unknown_symbol_has_lowest_priority():
    assert priority("^") == priority("(")


def test_unmatched_closing_paren_raises():
    with pytest.raises(ValueError):
        to_postfix("a+b)")


def test_main_prints_postfix(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("a+b*c\n"))
    assert main([]) == 0
    assert "Postfix: abc*+" in capsys.readouterr().out


def test_main_without_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1


def test_main_unbalanced(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("a)\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err