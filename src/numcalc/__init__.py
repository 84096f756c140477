"""numeral-calc: two-operand arithmetic in Roman or Arabic numerals.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import numcalc

    numcalc.evaluate("1 + 2")       # '3'
    numcalc.evaluate("VI / III")    # 'II'
    numcalc.evaluate("2 - 5")       # '-3'

    # Inspect which numeral system accepted an input
    match = numcalc.parse("XIV * II")
    match.system                    # 'roman'
    match.expression.left           # 14

    numcalc.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from numcalc.errors import (
    CalculatorError,
    DivisionByZero,
    InvalidExpression,
    UnknownOperator,
    UnrepresentableValue,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from numcalc.dispatcher.dispatcher import Match


def evaluate(source: str) -> str:
    """Evaluate a two-operand expression and format the result.

    Parameters
    ----------
    source:
        Expression text such as ``"1 + 2"`` or ``"VI / III"``.

    Returns
    -------
    str
        The result, written in the same numeral system as the input.

    Raises
    ------
    numcalc.errors.CalculatorError
        If the input is not a valid expression or cannot be evaluated.
    """
    from numcalc.dispatcher.dispatcher import evaluate as _evaluate

    return _evaluate(source)


def parse(source: str) -> "Match":
    """Parse an expression without evaluating it.

    Parameters
    ----------
    source:
        Expression text.

    Returns
    -------
    Match
        The accepting interpreter and the parsed ``Expression``.

    Raises
    ------
    numcalc.errors.InvalidExpression
        If no interpreter accepts the input.
    """
    from numcalc.dispatcher.dispatcher import match as _match

    return _match(source)


__all__ = [
    "__version__",
    "evaluate",
    "parse",
    "CalculatorError",
    "InvalidExpression",
    "DivisionByZero",
    "UnknownOperator",
    "UnrepresentableValue",
]
