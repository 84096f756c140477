"""Interpreter for expressions written with Arabic decimal digits."""
from __future__ import annotations

import re

from numcalc.errors import InvalidExpression
from numcalc.interpreters.base import Interpreter

# len(str(2**63 - 1))
_MAX_SIGNIFICANT_DIGITS = 19


class ArabicInterpreter(Interpreter):
    """Recognises ``digits op digits``, e.g. ``12 * 3``.

    Every operator is valid; results may be zero or negative.
    """

    name = "arabic"
    pattern = re.compile(r"^(\d+)\s*([-/*+])\s*(\d+)$", re.ASCII)

    def to_int(self, numeral: str) -> int:
        """Convert a digit run to an integer.

        Raises
        ------
        InvalidExpression
            If the operand has more significant digits than fit in a
            signed 64-bit integer.
        """
        significant = numeral.lstrip("0") or "0"
        if len(significant) > _MAX_SIGNIFICANT_DIGITS:
            raise InvalidExpression(
                numeral, "operand is outside the 64-bit integer range"
            )
        return int(significant)

    def format(self, value: int) -> str:
        return str(value)
