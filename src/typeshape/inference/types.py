"""
Structural type model for values inferred from JSON-like samples.

An InferredType is a record of *kind fields*. A leaf kind (string, number,
boolean, null, undefined, unknown) is recorded by name in ``markers``; the
two container kinds carry a payload: ``properties`` for objects and
``elements`` for arrays. Several kinds present at once form a union of what
was observed across samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
NULL = "null"
UNDEFINED_KIND = "undefined"
UNKNOWN_KIND = "unknown"
OBJECT = "object"
ARRAY = "array"

LEAF_KINDS: Tuple[str, ...] = (STRING, NUMBER, BOOLEAN, NULL, UNDEFINED_KIND, UNKNOWN_KIND)

# Key used when an empty mapping was observed: "any string key, unknown value".
MAP_PLACEHOLDER_KEY = "[k:string]"

Property = Tuple[str, "InferredType"]


@dataclass(frozen=True, eq=False)
class InferredType:
    markers: Tuple[str, ...] = ()
    properties: Optional[Tuple[Property, ...]] = None
    elements: Optional[Tuple["InferredType", ...]] = None

    def __post_init__(self) -> None:
        unrecognized = [m for m in self.markers if m not in LEAF_KINDS]
        if unrecognized:
            raise ValueError(f"Unrecognized kind markers: {unrecognized}")
        if len(set(self.markers)) != len(self.markers):
            raise ValueError(f"Duplicate kind markers: {list(self.markers)}")
        if self.properties is not None:
            names = [name for name, _ in self.properties]
            if len(set(names)) != len(names):
                raise ValueError(f"Duplicate property names: {names}")
        if not self.kinds:
            raise ValueError("An InferredType must carry at least one kind")

    @property
    def kinds(self) -> FrozenSet[str]:
        kinds = set(self.markers)
        if self.properties is not None:
            kinds.add(OBJECT)
        if self.elements is not None:
            kinds.add(ARRAY)
        return frozenset(kinds)

    @property
    def is_object(self) -> bool:
        return self.properties is not None

    @property
    def is_array(self) -> bool:
        return self.elements is not None

    @property
    def is_optional(self) -> bool:
        return UNDEFINED_KIND in self.markers

    def property_map(self) -> dict:
        return dict(self.properties or ())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InferredType):
            return NotImplemented
        return compare_types(self, other)

    def __hash__(self) -> int:
        return hash(self.kinds)

    def __repr__(self) -> str:
        parts = list(self.markers)
        if self.properties is not None:
            inner = ", ".join(f"{name}: {value!r}" for name, value in self.properties)
            parts.append(f"{{{inner}}}")
        if self.elements is not None:
            parts.append(f"[{', '.join(repr(e) for e in self.elements)}]")
        return f"InferredType({' | '.join(parts)})"


def leaf(*markers: str) -> InferredType:
    return InferredType(markers=tuple(markers))


UNKNOWN = leaf(UNKNOWN_KIND)


def is_placeholder(t: InferredType) -> bool:
    """True for the bare ``{unknown}`` type produced for empty collections."""
    return t.kinds == {UNKNOWN_KIND}


def with_marker(t: InferredType, marker: str) -> InferredType:
    if marker in t.markers:
        return t
    return InferredType(markers=t.markers + (marker,), properties=t.properties, elements=t.elements)


def compare_types(a: InferredType, b: InferredType) -> bool:
    """Structural equivalence.

    Kind sets must match exactly. Object payloads must share their property
    names and agree property by property. Array payloads are compared as
    sets: every element needs an equal counterpart on the other side, checked
    in both directions, so duplicates are not counted.
    """
    if a is b:
        return True
    if a.kinds != b.kinds:
        return False
    if a.properties is not None and b.properties is not None:
        right = b.property_map()
        if {name for name, _ in a.properties} != set(right):
            return False
        for name, value in a.properties:
            if not compare_types(value, right[name]):
                return False
    if a.elements is not None and b.elements is not None:
        for value in a.elements:
            if not any(compare_types(value, other) for other in b.elements):
                return False
        for value in b.elements:
            if not any(compare_types(value, other) for other in a.elements):
                return False
    return True
