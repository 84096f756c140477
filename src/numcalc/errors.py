"""Error types raised by the numcalc evaluator.

Every error surfaced to callers derives from ``CalculatorError`` and
carries a human-readable message, so that the CLI can print a single
``Error: ...`` line regardless of what went wrong.  Structured
attributes are kept alongside the message for programmatic callers.

A failed structural match inside a single interpreter is *not* an
error: interpreters signal it by returning ``None`` from ``parse``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numcalc.expression.nodes import Expression


class CalculatorError(Exception):
    """Base class for all errors surfaced by numcalc."""


class InvalidExpression(CalculatorError):
    """Raised when no interpreter both parses and validates the input.

    Covers malformed syntax, mixed numeral systems, the wrong number of
    operands, Roman subtraction with a non-positive result, and operands
    outside the signed 64-bit range.
    """

    def __init__(self, source: str, reason: str = "not a valid expression") -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source!r}: {reason}")


class DivisionByZero(CalculatorError):
    """Raised when an expression divides by a zero right operand."""

    def __init__(self, expression: Expression) -> None:
        self.expression = expression
        super().__init__(f"division by zero in {expression}")


class UnknownOperator(CalculatorError):
    """Raised for an operator symbol outside ``+ - * /``."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"unknown operator {symbol!r}")


class UnrepresentableValue(CalculatorError):
    """Raised when a result cannot be written in the chosen numeral system.

    Roman numerals have no symbol for zero or for negative quantities.
    """

    def __init__(self, value: int, system: str) -> None:
        self.value = value
        self.system = system
        super().__init__(f"{value} cannot be represented as a {system} numeral")
