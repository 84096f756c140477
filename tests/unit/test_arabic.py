"""Unit tests for numcalc.interpreters.arabic."""
from __future__ import annotations

import pytest

from numcalc.errors import InvalidExpression
from numcalc.expression.nodes import Expression, Operator
from numcalc.interpreters.arabic import ArabicInterpreter


@pytest.fixture()
def interpreter() -> ArabicInterpreter:
    return ArabicInterpreter()


class TestArabicParse:
    @pytest.mark.parametrize("text, expected", [
        ("1 + 2", Expression(1, Operator.ADD, 2)),
        ("1+2", Expression(1, Operator.ADD, 2)),
        ("10\t-\t20", Expression(10, Operator.SUB, 20)),
        ("007 * 3", Expression(7, Operator.MUL, 3)),
        ("6 / 0", Expression(6, Operator.DIV, 0)),
        ("9223372036854775807 + 0", Expression(2**63 - 1, Operator.ADD, 0)),
    ])
    def test_parse_matches(
        self, interpreter: ArabicInterpreter, text: str, expected: Expression
    ) -> None:
        assert interpreter.parse(text) == expected

    @pytest.mark.parametrize("text", [
        "VI / III",
        "I + 1",
        "1",
        "1 + 2 + 3",
        "-1 + 2",
        "1.5 + 2",
        "1 % 2",
        "١ + ٢",
        "",
    ])
    def test_parse_no_match(self, interpreter: ArabicInterpreter, text: str) -> None:
        assert interpreter.parse(text) is None

    def test_operand_beyond_int64_raises(self, interpreter: ArabicInterpreter) -> None:
        with pytest.raises(InvalidExpression):
            interpreter.parse("9223372036854775808 + 1")

    def test_very_long_operand_raises(self, interpreter: ArabicInterpreter) -> None:
        with pytest.raises(InvalidExpression) as excinfo:
            interpreter.parse("1" * 5000 + " + 1")
        assert "64-bit" in excinfo.value.reason

    def test_leading_zeros_do_not_count_toward_range(
        self, interpreter: ArabicInterpreter
    ) -> None:
        expr = interpreter.parse("0" * 5000 + "1 + 1")
        assert expr == Expression(1, Operator.ADD, 1)

    @pytest.mark.parametrize("numeral, value", [
        ("0", 0),
        ("0000", 0),
        ("0009223372036854775807", 2**63 - 1),
    ])
    def test_to_int(self, interpreter: ArabicInterpreter, numeral: str, value: int) -> None:
        assert interpreter.to_int(numeral) == value


class TestArabicValidityAndFormat:
    @pytest.mark.parametrize("op", list(Operator))
    def test_every_expression_is_valid(self, interpreter: ArabicInterpreter, op: Operator) -> None:
        assert interpreter.is_valid(Expression(1, op, 5))

    @pytest.mark.parametrize("value, text", [
        (0, "0"),
        (3, "3"),
        (-3, "-3"),
        (2**63 - 1, "9223372036854775807"),
    ])
    def test_format(self, interpreter: ArabicInterpreter, value: int, text: str) -> None:
        assert interpreter.format(value) == text

    def test_name(self, interpreter: ArabicInterpreter) -> None:
        assert interpreter.name == "arabic"
