"""
In-memory inference pipeline.

Each sample is interpreted on its own, the resulting types are merged left to
right in sample order, degenerate leaves are normalized and the result is
rendered as a TypeScript declaration. No I/O happens here; see
``typeshape.orchestrator`` for the file-based flow.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from typeshape.core.exceptions import NoSamplesError
from typeshape.core.logger import get_logger
from typeshape.inference.interpreter import interpret_type
from typeshape.inference.merge import merge_all
from typeshape.inference.normalize import normalize_type
from typeshape.inference.types import InferredType
from typeshape.models.render_options import RenderOptions
from typeshape.render.typescript import render_declaration

logger = get_logger(__name__)


def infer_type(samples: Sequence[Any]) -> InferredType:
    """Interpret, merge and normalize ``samples`` into one structural type.

    Raises:
        NoSamplesError: If ``samples`` is empty.
        UnsupportedValueKindError: If any sample holds a non JSON-like value.
    """
    if len(samples) == 0:
        raise NoSamplesError("At least one sample is required to infer a type")

    types = [interpret_type(sample, f"$[{idx}]") for idx, sample in enumerate(samples)]
    merged = merge_all(types)
    logger.debug(f"Merged {len(types)} sample types into kinds={sorted(merged.kinds)}")
    return normalize_type(merged)


def infer_declaration(samples: Sequence[Any], options: Optional[RenderOptions] = None) -> str:
    """
    Produce a TypeScript declaration describing every sample.

    Example:
        >>> infer_declaration([{"a": 1}, {"b": "x"}])
        'export type Data = {\\n\\ta? : number,\\n\\tb? : string\\n};'
    """
    declaration = render_declaration(infer_type(samples), options)
    logger.debug(f"Rendered declaration from {len(samples)} samples ({len(declaration)} chars)")
    return declaration
