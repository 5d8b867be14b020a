import io
import sys

import pytest

from dsakit.polynomial import (
    Term,
    add_polynomials,
    format_compact,
    format_spaced,
    main,
)

FIRST = [Term(3, 2), Term(2, 1), Term(1, 0)]
SECOND = [Term(4, 3), Term(2, 1), Term(3, 0)]
EXAMPLE_INPUT = "3\n3 2\n2 1\n1 0\n3\n4 3\n2 1\n3 0\n"


def test_worked_example_compact():
    assert format_compact(add_polynomials(FIRST, SECOND)) == "4x^3+3x^2+4x^1+4x^0"


def test_worked_example_spaced():
    assert format_spaced(add_polynomials(FIRST, SECOND)) == "4x^3 + 3x^2 + 4x^1 + 4x^0"


def test_empty_spaced_is_zero():
    assert format_spaced([]) == "0"


def test_empty_compact_is_empty_string():
    assert format_compact([]) == ""


@pytest.mark.parametrize("poly", [FIRST, SECOND, [Term(-5, 7)]])
def test_adding_empty_returns_other(poly):
    assert add_polynomials(poly, []) == poly
    assert add_polynomials([], poly) == poly


def test_equal_exponents_keep_zero_term():
    result = add_polynomials([Term(2, 1)], [Term(-2, 1)])
    assert [t.exp for t in result] == [1]
    assert result[0].coeff == 0


def test_exponents_stay_descending_and_coefficients_preserved():
    first = [Term(5, 9), Term(1, 4), Term(-3, 2)]
    second = [Term(2, 8), Term(7, 4), Term(6, 0)]
    result = add_polynomials(first, second)
    exps = [t.exp for t in result]
    assert exps == sorted(exps, reverse=True)
    assert len(set(exps)) == len(exps)
    total = sum(t.coeff for t in first) + sum(t.coeff for t in second)
    assert sum(t.coeff for t in result) == total


def test_addition_is_symmetric():
    assert add_polynomials(FIRST, SECOND) == add_polynomials(SECOND, FIRST)


def test_negative_coefficient_has_no_plus():
    rendered = format_compact([Term(3, 2), Term(-1, 0)])
    assert "+" not in rendered
    assert rendered.startswith(str(Term(3, 2)))


def test_leading_positive_term_has_no_plus():
    rendered = format_compact(SECOND)
    assert not rendered.startswith("+")
    assert rendered.count("+") == len(SECOND) - 1


def test_main_compact(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(EXAMPLE_INPUT))
    assert main([]) == 0
    assert "Result: 4x^3+3x^2+4x^1+4x^0" in capsys.readouterr().out


def test_main_spaced(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(EXAMPLE_INPUT))
    assert main(["--spaced"]) == 0
    out = capsys.readouterr().out
    assert f"First Polynomial: {format_spaced(FIRST)}" in out
    assert "Sum: 4x^3 + 3x^2 + 4x^1 + 4x^0" in out


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n1 x\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_rejects_truncated_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n1 1\n"))
    assert main([]) == 1