"""Abstract base class for numeral-system interpreters.

An interpreter recognises expressions written in one numeral system,
decides whether a recognised expression is meaningful in that system,
and renders computed values back in the same system.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod

from numcalc.expression.nodes import Expression, Operator


class Interpreter(ABC):
    """Parse, validate and format expressions for one numeral system.

    Subclasses provide ``name``, a compiled ``pattern`` with three groups
    (left operand, operator symbol, right operand), and the two
    conversion hooks ``to_int`` and ``format``.
    """

    name: str = ""
    pattern: re.Pattern[str]

    def parse(self, text: str) -> Expression | None:
        """Parse ``text`` into an ``Expression``.

        Returns
        -------
        Expression | None
            The parsed expression, or ``None`` when ``text`` does not
            have the shape this interpreter recognises.
        """
        found = self.pattern.fullmatch(text)
        if found is None:
            return None
        left, symbol, right = found.groups()
        return Expression(
            left=self.to_int(left),
            operator=Operator.from_symbol(symbol),
            right=self.to_int(right),
        )

    def is_valid(self, expr: Expression) -> bool:
        """Return True if ``expr`` is meaningful in this numeral system."""
        return True

    @abstractmethod
    def to_int(self, numeral: str) -> int:
        """Convert a single operand numeral to an integer."""

    @abstractmethod
    def format(self, value: int) -> str:
        """Render ``value`` as a numeral in this system."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
