"""Numeral-system interpreters.

The set of numeral systems is closed: ``roman`` and ``arabic``.  Use
``get_interpreter`` to resolve one by name, or ``default_interpreters``
for the standard trial order used by the ``Calculator``.
"""
from __future__ import annotations

from numcalc.interpreters.arabic import ArabicInterpreter
from numcalc.interpreters.base import Interpreter
from numcalc.interpreters.roman import RomanInterpreter, decode_roman, encode_roman

INTERPRETERS: dict[str, type[Interpreter]] = {
    RomanInterpreter.name: RomanInterpreter,
    ArabicInterpreter.name: ArabicInterpreter,
}


class UnknownNumeralSystem(KeyError):
    """Raised when a requested numeral system name is not known."""

    def __init__(self, name: str) -> None:
        self.system_name = name
        super().__init__(
            f"Unknown numeral system {name!r}. "
            f"Available systems: {', '.join(sorted(INTERPRETERS))}."
        )


def get_interpreter(name: str) -> Interpreter:
    """Return a new interpreter for the numeral system called ``name``.

    Raises
    ------
    UnknownNumeralSystem
        If ``name`` is not ``"roman"`` or ``"arabic"``.
    """
    try:
        cls = INTERPRETERS[name.lower()]
    except KeyError:
        raise UnknownNumeralSystem(name) from None
    return cls()


def default_interpreters() -> list[Interpreter]:
    """Return the standard trial order: Roman first, then Arabic."""
    return [RomanInterpreter(), ArabicInterpreter()]


__all__ = [
    "Interpreter",
    "ArabicInterpreter",
    "RomanInterpreter",
    "decode_roman",
    "encode_roman",
    "INTERPRETERS",
    "UnknownNumeralSystem",
    "get_interpreter",
    "default_interpreters",
]
