"""
Unification of inferred types.

``merge_types(a, b)`` returns a type describing every value either side
describes. Leaf kinds are unioned, object properties are matched by name
(a property seen on one side only becomes optional) and array element types
are pooled, with all object-shaped elements folded into one element and all
array-shaped elements folded into another.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, List, Optional, Tuple

from typeshape.core.exceptions import InternalInvariantViolation, NoSamplesError
from typeshape.inference.dedupe import dedupe_types
from typeshape.inference.types import (
    UNDEFINED_KIND,
    UNKNOWN,
    InferredType,
    Property,
    compare_types,
    is_placeholder,
    with_marker,
)


def _merge_properties(left: Tuple[Property, ...], right: Tuple[Property, ...]) -> Tuple[Property, ...]:
    right_names = {name for name, _ in right}
    left_names = {name for name, _ in left}

    shared = [(name, t) for name, t in left if name in right_names]
    only_left = [(name, t) for name, t in left if name not in right_names]
    only_right = [(name, t) for name, t in right if name not in left_names]

    right_map = dict(right)
    merged: List[Property] = []
    for name, t in shared:
        other = right_map.get(name)
        if other is None:
            raise InternalInvariantViolation(
                f"Shared property {name!r} missing from right-hand object during merge"
            )
        merged.append((name, merge_types(t, other)))

    # At least one sample lacked these keys.
    merged.extend((name, with_marker(t, UNDEFINED_KIND)) for name, t in only_left + only_right)
    return tuple(merged)


def _merge_elements(
    left: Tuple[InferredType, ...], right: Tuple[InferredType, ...]
) -> Tuple[InferredType, ...]:
    pooled = dedupe_types(left + right)
    concrete = [t for t in pooled if not is_placeholder(t)]
    if not concrete:
        return (UNKNOWN,)

    objects = [t for t in concrete if t.is_object]
    arrays = [t for t in concrete if t.is_array and not t.is_object]
    primitives = [t for t in concrete if not t.is_object and not t.is_array]

    elements = list(primitives)
    if objects:
        elements.append(reduce(merge_types, objects))
    if arrays:
        elements.append(reduce(merge_types, arrays))
    return tuple(elements)


def merge_types(a: InferredType, b: InferredType) -> InferredType:
    if compare_types(a, b):
        return a

    properties: Optional[Tuple[Property, ...]]
    if a.properties is not None and b.properties is not None:
        properties = _merge_properties(a.properties, b.properties)
    else:
        properties = a.properties if a.properties is not None else b.properties

    elements: Optional[Tuple[InferredType, ...]]
    if a.elements is not None and b.elements is not None:
        elements = _merge_elements(a.elements, b.elements)
    else:
        elements = a.elements if a.elements is not None else b.elements

    markers = a.markers + tuple(m for m in b.markers if m not in a.markers)
    return InferredType(markers=markers, properties=properties, elements=elements)


def merge_all(types: Iterable[InferredType]) -> InferredType:
    """Left fold of merge_types over ``types`` in order."""
    types = list(types)
    if not types:
        raise NoSamplesError("Cannot merge an empty sequence of types")
    return reduce(merge_types, types)
