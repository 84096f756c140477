"""Expression model for numcalc.

An ``Expression`` is the parsed form of a single ``left op right``
input.  It is a frozen dataclass, built only after an interpreter has
matched the input, and it knows how to compute its own value.  The
numeral system the operands were written in is not recorded here; the
interpreter that produced the expression owns that.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from numcalc.errors import DivisionByZero, InvalidExpression, UnknownOperator

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1


class Operator(Enum):
    """Binary arithmetic operators, keyed by their source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Return the operator written as ``symbol``.

        Raises
        ------
        UnknownOperator
            If ``symbol`` is not one of ``+ - * /``.
        """
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperator(symbol) from None


def _truncating_div(left: int, right: int) -> int:
    # Python's // floors; the calculator truncates toward zero.
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


@dataclass(frozen=True, slots=True)
class Expression:
    """Two integer operands joined by one binary operator.

    Parameters
    ----------
    left:
        Left-hand operand.
    operator:
        The binary operator.
    right:
        Right-hand operand.

    Raises
    ------
    InvalidExpression
        If either operand falls outside the signed 64-bit range.
    """

    left: int
    operator: Operator
    right: int

    def __post_init__(self) -> None:
        for operand in (self.left, self.right):
            if not INT64_MIN <= operand <= INT64_MAX:
                raise InvalidExpression(
                    str(self), f"operand {operand} is outside the 64-bit integer range"
                )

    def __str__(self) -> str:
        symbol = getattr(self.operator, "value", self.operator)
        return f"{self.left} {symbol} {self.right}"

    def calc(self) -> int:
        """Compute the value of this expression.

        Division truncates toward zero.

        Raises
        ------
        DivisionByZero
            If the operator is ``/`` and the right operand is zero.
        UnknownOperator
            If the operator is not a recognised ``Operator``.
        """
        if self.operator is Operator.ADD:
            return self.left + self.right
        if self.operator is Operator.SUB:
            return self.left - self.right
        if self.operator is Operator.MUL:
            return self.left * self.right
        if self.operator is Operator.DIV:
            if self.right == 0:
                raise DivisionByZero(self)
            return _truncating_div(self.left, self.right)
        raise UnknownOperator(str(getattr(self.operator, "value", self.operator)))
