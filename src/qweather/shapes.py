"""Structural selection among untagged payload shapes.

Some endpoints return one of several mutually exclusive payloads without a
type tag: a body carries a ``daily`` list, or an ``hourly`` list, or a
``location`` list, and so on. A ``ShapeSet`` picks the variant by field
presence:

- a variant's signature is the set of wire names of its required fields;
- variants are tried in declared order and the first whose signature is fully
  present in the body is validated and returned;
- a set in which one signature contains another is rejected at construction.

Disjoint signatures can still all be present in one body (``daily`` and
``hourly`` together, say). Declared order breaks that tie: the earlier
variant wins, and the extra matches are logged at debug level as
``qweather_shape_tie``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from .logging import get_logger

logger = get_logger("shapes")


def signature(model: type[BaseModel]) -> frozenset[str]:
    return frozenset(
        field.alias or name
        for name, field in model.model_fields.items()
        if field.is_required()
    )


class ShapeSet:
    def __init__(self, *variants: type[BaseModel]) -> None:
        if not variants:
            raise ValueError("ShapeSet needs at least one variant")
        signatures = [(variant, signature(variant)) for variant in variants]
        for variant, sig in signatures:
            if not sig:
                raise ValueError(f"{variant.__name__} has no required fields to match on")
        for i, (left, left_sig) in enumerate(signatures):
            for right, right_sig in signatures[i + 1:]:
                if left_sig <= right_sig or right_sig <= left_sig:
                    raise ValueError(
                        f"Ambiguous shapes: {left.__name__} {sorted(left_sig)} "
                        f"overlaps {right.__name__} {sorted(right_sig)}"
                    )
        self.variants = tuple(variants)
        self._signatures = tuple(signatures)

    def candidates(self, obj: Mapping[str, Any]) -> list[type[BaseModel]]:
        """Every variant whose required fields are all present, in declared order."""
        keys = obj.keys()
        return [variant for variant, sig in self._signatures if sig <= keys]

    def match(self, obj: Mapping[str, Any]) -> type[BaseModel] | None:
        """Return the first variant whose required fields are all present."""
        found = self.candidates(obj)
        if not found:
            return None
        if len(found) > 1:
            logger.debug(
                "qweather_shape_tie",
                extra={
                    "extra": {
                        "chosen": found[0].__name__,
                        "also_matched": [v.__name__ for v in found[1:]],
                    }
                },
            )
        return found[0]

    def resolve(self, obj: Any) -> BaseModel:
        if not isinstance(obj, Mapping):
            raise ValueError(f"expected a JSON object, got {type(obj).__name__}")
        variant = self.match(obj)
        if variant is None:
            expected = " | ".join(v.__name__ for v in self.variants)
            raise ValueError(f"payload matches none of: {expected}")
        try:
            return variant.model_validate(obj)
        except ValidationError as exc:
            raise ValueError(f"{variant.__name__}: {exc}") from None

    def __iter__(self):
        return iter(self.variants)

    def __repr__(self) -> str:
        return f"ShapeSet({', '.join(v.__name__ for v in self.variants)})"
