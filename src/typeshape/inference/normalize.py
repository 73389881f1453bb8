from __future__ import annotations

from typeshape.inference.dedupe import dedupe_types
from typeshape.inference.types import NULL, UNDEFINED_KIND, UNKNOWN, InferredType

_DEGENERATE = (frozenset({NULL}), frozenset({UNDEFINED_KIND}))


def normalize_type(t: InferredType) -> InferredType:
    """Replace types that were only ever null, or only ever absent, with ``unknown``.

    Recurses through object properties and array elements; containers
    themselves are kept. Returns a new type and leaves ``t`` untouched.
    """
    if t.kinds in _DEGENERATE:
        return UNKNOWN

    properties = None
    if t.properties is not None:
        properties = tuple((name, normalize_type(value)) for name, value in t.properties)
    elements = None
    if t.elements is not None:
        # two degenerate elements can collapse to the same placeholder
        elements = tuple(dedupe_types(normalize_type(value) for value in t.elements))
    return InferredType(markers=t.markers, properties=properties, elements=elements)
