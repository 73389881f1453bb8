from __future__ import annotations

from typing import Any, Mapping

from typeshape.core.exceptions import UnsupportedValueKindError
from typeshape.inference.dedupe import dedupe_types
from typeshape.inference.types import (
    BOOLEAN,
    MAP_PLACEHOLDER_KEY,
    NULL,
    NUMBER,
    STRING,
    UNDEFINED_KIND,
    UNKNOWN,
    InferredType,
    leaf,
)


class _Undefined:
    """Sentinel for a slot that was never populated (JSON has no literal for it)."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def interpret_type(value: Any, path: str = "$") -> InferredType:
    """Build the structural type of a single JSON-like value.

    ``path`` locates ``value`` inside the sample and only feeds error messages.
    Raises UnsupportedValueKindError for anything that is not JSON-like.
    """
    if isinstance(value, str):
        return leaf(STRING)
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return leaf(BOOLEAN)
    if isinstance(value, (int, float)):
        return leaf(NUMBER)
    if isinstance(value, (list, tuple)):
        elements = dedupe_types(
            interpret_type(item, f"{path}[{idx}]") for idx, item in enumerate(value)
        )
        if not elements:
            elements = [UNKNOWN]
        return InferredType(elements=tuple(elements))
    if value is UNDEFINED:
        return leaf(UNDEFINED_KIND)
    if value is None:
        return leaf(NULL)
    if isinstance(value, Mapping):
        properties = []
        for key, inner in value.items():
            if not isinstance(key, str):
                raise UnsupportedValueKindError(key, f"{path} (mapping key)")
            properties.append((key, interpret_type(inner, f"{path}.{key}")))
        if not properties:
            properties = [(MAP_PLACEHOLDER_KEY, UNKNOWN)]
        return InferredType(properties=tuple(properties))
    raise UnsupportedValueKindError(value, path)
