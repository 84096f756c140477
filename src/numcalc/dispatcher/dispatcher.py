"""Ordered trial of interpreters against a raw input string.

The ``Calculator`` asks each interpreter in turn to parse the input.
An interpreter that does not recognise the input, or recognises it but
rejects the expression as meaningless in its numeral system, simply
passes the input on to the next one.  The first interpreter that both
parses and validates the input evaluates it and formats the result.

Usage
-----
::

    from numcalc.dispatcher import Calculator

    calculator = Calculator()
    calculator.evaluate("VI / III")   # 'II'
    calculator.evaluate("2 - 5")      # '-3'
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from numcalc.errors import InvalidExpression
from numcalc.expression.nodes import Expression
from numcalc.interpreters import Interpreter, default_interpreters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    """The interpreter selected for an input and the expression it parsed.

    Parameters
    ----------
    interpreter:
        The interpreter that both parsed and validated the input.
    expression:
        The parsed expression.
    """

    interpreter: Interpreter
    expression: Expression

    @property
    def system(self) -> str:
        """Name of the numeral system the input was written in."""
        return self.interpreter.name


class Calculator:
    """Evaluate two-operand expressions in Roman or Arabic numerals.

    Parameters
    ----------
    interpreters:
        Interpreters to try, in order.  Defaults to Roman then Arabic.
        The character sets of the built-in systems are disjoint, so the
        order only fixes which one is tried first.
    """

    def __init__(self, interpreters: Iterable[Interpreter] | None = None) -> None:
        self._interpreters: list[Interpreter] = (
            list(interpreters) if interpreters is not None else default_interpreters()
        )

    @property
    def interpreters(self) -> tuple[Interpreter, ...]:
        """The interpreters in trial order."""
        return tuple(self._interpreters)

    def match(self, text: str) -> Match:
        """Find the first interpreter that parses and validates ``text``.

        Raises
        ------
        InvalidExpression
            If no interpreter accepts the input.
        """
        for interpreter in self._interpreters:
            expression = interpreter.parse(text)
            if expression is None:
                logger.debug("%s: no match for %r", interpreter.name, text)
                continue
            if not interpreter.is_valid(expression):
                logger.debug("%s: rejected %s", interpreter.name, expression)
                continue
            logger.debug("%s: selected for %r", interpreter.name, text)
            return Match(interpreter=interpreter, expression=expression)
        raise InvalidExpression(text)

    def evaluate(self, text: str) -> str:
        """Evaluate ``text`` and return the result in the same numeral system.

        Parameters
        ----------
        text:
            A single expression, e.g. ``"1 + 2"`` or ``"VI / III"``.

        Returns
        -------
        str
            The formatted result.

        Raises
        ------
        InvalidExpression
            If no interpreter accepts the input.
        DivisionByZero
            If the input divides by zero.
        UnrepresentableValue
            If the result cannot be written in the input's numeral system.
        """
        found = self.match(text)
        value = found.expression.calc()
        logger.debug("%s = %d", found.expression, value)
        return found.interpreter.format(value)


def match(text: str) -> Match:
    """Convenience function: match ``text`` with the default interpreters."""
    return Calculator().match(text)


def evaluate(text: str) -> str:
    """Convenience function: evaluate ``text`` with the default interpreters."""
    return Calculator().evaluate(text)
