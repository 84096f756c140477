"""Expression model and serialization.

Exports the ``Expression`` dataclass, the ``Operator`` enum and the
``ExpressionSerializer``.
"""
from __future__ import annotations

from numcalc.expression.nodes import INT64_MAX, INT64_MIN, Expression, Operator
from numcalc.expression.serializer import ExpressionSerializer

__all__ = [
    "Expression",
    "Operator",
    "ExpressionSerializer",
    "INT64_MIN",
    "INT64_MAX",
]
