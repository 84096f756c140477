"""Dispatcher module.

Exports the ``Calculator`` class, the ``Match`` result type and the
``evaluate``/``match`` convenience functions.
"""
from __future__ import annotations

from numcalc.dispatcher.dispatcher import Calculator, Match, evaluate, match

__all__ = [
    "Calculator",
    "Match",
    "evaluate",
    "match",
]
