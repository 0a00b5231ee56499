"""
Module: test_arith.py

Tests for the one-operation calculator
"""

import pytest

from runmenu.core.arith import (
    ANSWER_PREFIX,
    answer_label,
    evaluate,
    format_number,
    is_answer,
)


class TestEvaluate:
    """Recognising and computing `<number> <op> <number>`"""

    @pytest.mark.parametrize("text, expected", [
        ("2+3", 5),
        ("10-4", 6),
        ("6*7", 42),
        ("9/2", 4.5),
        ("1.5 + 2.25", 3.75),
        ("  8 /  4 ", 2),
        ("1e3*2", 2000),
        (".5+.5", 1),
    ])
    def test_basic_operations(self, text, expected):
        assert evaluate(text) == pytest.approx(expected)

    def test_leading_minus_is_a_sign(self):
        assert evaluate("-5+3") == -2
        assert evaluate("-5*2") == -10

    def test_bare_negative_number_is_not_an_expression(self):
        assert evaluate("-5") is None

    def test_subtraction_after_a_negative_left_operand_does_not_match(self):
        # the first "-" is the sign, so the split never happens
        assert evaluate("-5-3") is None

    def test_plus_wins_over_minus(self):
        # split at "+": "5-1" is not a number, then "-" splits "5" / "1+2"
        assert evaluate("5-1+2") is None
        assert evaluate("2+-3") == -1

    def test_only_first_operator_is_used(self):
        assert evaluate("1+2+3") is None
        assert evaluate("2*3*4") is None

    def test_division_by_zero_gives_nothing(self):
        assert evaluate("10/0") is None
        assert evaluate("10/0.0") is None

    @pytest.mark.parametrize("text", ["7*", "*7", "+", "", "   ", "vim", "2x3", "inf+1", "1_000+1", "(1+2)"])
    def test_non_expressions(self, text):
        assert evaluate(text) is None

    def test_none_input(self):
        assert evaluate(None) is None


class TestAnswerLabel:
    """Formatting results for display"""

    def test_integral_values_have_no_fraction(self):
        assert format_number(5.0) == "5"
        assert format_number(-2.0) == "-2"

    def test_fractional_values(self):
        assert format_number(2.5) == "2.5"
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_never_uses_exponent(self):
        assert format_number(1e16) == "10000000000000000"
        assert format_number(1e300) == "1" + "0" * 300
        assert format_number(1e-07) == "0.0000001"

    def test_small_quotient_label(self):
        assert answer_label(evaluate("1/10000000")) == "Answer: 0.0000001"
        assert answer_label(evaluate("1e16+0")) == "Answer: 10000000000000000"

    def test_label_prefix(self):
        assert answer_label(5.0) == "Answer: 5"
        assert ANSWER_PREFIX == "Answer: "
        assert is_answer("Answer: 5")
        assert not is_answer("answer")
        assert not is_answer("vim")
