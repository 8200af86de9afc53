import pytest

from labkit.evaluator import evaluate


def test_plain_number():
    assert evaluate("42") == 42.0


def test_division_gives_fraction():
    assert evaluate("7/2") == 3.5


def test_precedence_matches_explicit_grouping():
    assert evaluate("1+2*3") == evaluate("1+(2*3)")


@pytest.mark.parametrize("expr", ["10 - 4 / 2", "(3 + 5) * 2", "100/10/5"])
def test_whitespace_does_not_change_result(expr):
    assert evaluate(expr) == evaluate(expr.replace(" ", ""))
    assert evaluate(expr) == evaluate(f"  {expr}\t")


def test_addition_commutes():
    assert evaluate("13+29") == evaluate("29+13")


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("1/0")


def test_division_by_computed_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("10/(5-5)")


def test_text_after_unknown_character_is_ignored():
    assert evaluate("2 x 3") == 2.0


def test_unary_minus_is_rejected():
    with pytest.raises(ValueError, match=r"Unexpected token: -"):
        evaluate("-3")


def test_empty_expression_is_rejected():
    with pytest.raises(ValueError, match="Unexpected token"):
        evaluate("")