"""Serialization of matched expressions to and from JSON and YAML.

The serialized form is a flat dict::

    {"kind": "Expression", "system": "roman",
     "left": 6, "operator": "/", "right": 3}

Operands are stored as integers regardless of the numeral system they
were written in; ``system`` records which interpreter accepted the
input and is ignored when deserializing.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

import yaml

from numcalc.expression.nodes import Expression, Operator

if TYPE_CHECKING:
    from numcalc.dispatcher.dispatcher import Match


class ExpressionSerializer:
    """Converts between matched expressions and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (Match -> dict)
    # ------------------------------------------------------------------

    def to_dict(self, match: "Match") -> dict[str, object]:
        """Serialize a ``Match`` to a JSON-compatible dict."""
        expr = match.expression
        return {
            "kind": "Expression",
            "system": match.system,
            "left": expr.left,
            "operator": expr.operator.symbol,
            "right": expr.right,
        }

    # ------------------------------------------------------------------
    # Deserialization (dict -> Expression)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Expression:
        """Rebuild an ``Expression`` from a dict produced by ``to_dict``.

        Raises
        ------
        ValueError
            If ``data`` is not a mapping, is not an expression, or lacks
            a required field.
        UnknownOperator
            If the operator symbol is not recognised.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping, got {type(data).__name__}")
        kind = data.get("kind", "Expression")
        if kind != "Expression":
            raise ValueError(f"Unknown kind: {kind!r}")
        try:
            left = data["left"]
            symbol = data["operator"]
            right = data["right"]
        except KeyError as exc:
            raise ValueError(f"Missing field {exc.args[0]!r}") from None
        return Expression(
            left=int(left),  # type: ignore[call-overload]
            operator=Operator.from_symbol(str(symbol)),
            right=int(right),  # type: ignore[call-overload]
        )

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, match: "Match", indent: int = 2) -> str:
        """Serialize a ``Match`` to a JSON string."""
        return json.dumps(self.to_dict(match), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Expression:
        """Deserialize an ``Expression`` from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, match: "Match") -> str:
        """Serialize a ``Match`` to a YAML string."""
        return yaml.dump(self.to_dict(match), default_flow_style=False, sort_keys=False)

    def from_yaml(self, text: str) -> Expression:
        """Deserialize an ``Expression`` from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
