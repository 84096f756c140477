"""Interpreter for expressions written with Roman numerals.

Only the symbols ``I V X L C M`` are recognised.  Decoding is lenient:
the input pattern accepts any sequence of those symbols and the decoder
assigns a value to malformed numerals (``IIII``, ``VX``) instead of
rejecting them.  Encoding uses greedy subtractive notation.

Usage
-----
::

    from numcalc.interpreters.roman import decode_roman, encode_roman

    decode_roman("MCMXCIV")   # 1994
    encode_roman(1994)        # 'MCMXCIV'
"""
from __future__ import annotations

import re

from numcalc.errors import UnrepresentableValue
from numcalc.expression.nodes import Expression, Operator
from numcalc.interpreters.base import Interpreter

_VALUES: dict[str, int] = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "M": 1000}

# symbol -> the following symbols that turn it into a subtraction
_SUBTRACTIVE: dict[str, str] = {"I": "XV", "X": "CL", "C": "M"}


def decode_roman(numeral: str) -> int:
    """Decode a Roman numeral to an integer.

    The numeral is scanned right to left.  ``I``, ``X`` and ``C`` are
    subtracted when the symbol to their right is one they pair with
    (``IV``/``IX``, ``XL``/``XC``, ``CM``) and added otherwise; ``V``,
    ``L`` and ``M`` are always added.  The empty string decodes to 0.

    Raises
    ------
    ValueError
        If ``numeral`` contains a character outside ``IVXLCM``.
    """
    result = 0
    previous = ""
    for symbol in reversed(numeral):
        try:
            value = _VALUES[symbol]
        except KeyError:
            raise ValueError(f"Invalid Roman numeral character: {symbol!r}") from None
        if previous and previous in _SUBTRACTIVE.get(symbol, ""):
            result -= value
        else:
            result += value
        previous = symbol
    return result


def encode_roman(value: int) -> str:
    """Encode an integer as a Roman numeral using greedy subtraction.

    ``L`` and ``V`` are emitted at most once each; after the preceding
    reductions the remainder never holds two of them.  Values below 1
    produce an empty string.
    """
    rem = value
    parts: list[str] = []
    if rem // 1000 > 0:
        parts.append("M" * (rem // 1000))
        rem %= 1000
    if rem >= 900:
        parts.append("CM")
        rem -= 900
    if rem // 100 > 0:
        parts.append("C" * (rem // 100))
        rem %= 100
    if rem >= 90:
        parts.append("XC")
        rem -= 90
    if rem // 50 > 0:
        parts.append("L")
        rem %= 50
    if rem >= 40:
        parts.append("XL")
        rem -= 40
    if rem // 10 > 0:
        parts.append("X" * (rem // 10))
        rem %= 10
    if rem >= 9:
        parts.append("IX")
        rem -= 9
    if rem // 5 > 0:
        parts.append("V")
        rem %= 5
    if rem >= 4:
        parts.append("IV")
        rem -= 4
    if rem > 0:
        parts.append("I" * rem)
    return "".join(parts)


class RomanInterpreter(Interpreter):
    """Recognises ``numeral op numeral``, e.g. ``VI / III``.

    Subtraction is only valid when the left operand is strictly greater
    than the right one, since Roman numerals cannot express zero or
    negative values.
    """

    name = "roman"
    pattern = re.compile(r"^([IVXCML]+)\s*([-/*+])\s*([IVXCML]+)$", re.ASCII)

    def to_int(self, numeral: str) -> int:
        return decode_roman(numeral)

    def is_valid(self, expr: Expression) -> bool:
        if expr.operator is not Operator.SUB:
            return True
        return expr.left > expr.right

    def format(self, value: int) -> str:
        """Render ``value`` as a Roman numeral.

        Raises
        ------
        UnrepresentableValue
            If ``value`` is zero or negative.
        """
        if value < 1:
            raise UnrepresentableValue(value, self.name)
        return encode_roman(value)
