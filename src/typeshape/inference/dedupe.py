from __future__ import annotations

from typing import Iterable, List

from typeshape.inference.types import InferredType, compare_types


def dedupe_types(types: Iterable[InferredType]) -> List[InferredType]:
    """Drop types structurally equal to an earlier one, keeping first-seen order."""
    deduped: List[InferredType] = []
    for t in types:
        if not any(compare_types(kept, t) for kept in deduped):
            deduped.append(t)
    return deduped
