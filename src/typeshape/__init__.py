"""typeshape.

Infers a structural type from sample JSON-like values and renders it as a
TypeScript declaration (``export type Data = ...;``).

Public API:
    infer_declaration(samples)                 -> declaration text
    read_type_from_data_file(input, output)    -> same, from and to files
"""

from typeshape.core.exceptions import (
    InternalInvariantViolation,
    NoSamplesError,
    TypeshapeException,
    UnsupportedValueKindError,
)
from typeshape.inference.interpreter import UNDEFINED
from typeshape.models.render_options import RenderOptions
from typeshape.orchestrator import DeclarationOrchestrator, read_type_from_data_file
from typeshape.pipeline import infer_declaration, infer_type

__version__ = "0.1.0"

__all__ = [
    "DeclarationOrchestrator",
    "InternalInvariantViolation",
    "NoSamplesError",
    "RenderOptions",
    "TypeshapeException",
    "UNDEFINED",
    "UnsupportedValueKindError",
    "infer_declaration",
    "infer_type",
    "read_type_from_data_file",
]
