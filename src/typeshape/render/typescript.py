from __future__ import annotations

from typing import FrozenSet, List, Optional

from typeshape.inference.types import UNDEFINED_KIND, UNKNOWN_KIND, InferredType
from typeshape.models.render_options import RenderOptions

_DEFAULT_OPTIONS = RenderOptions()


def _render_object(t: InferredType, level: int, options: RenderOptions) -> str:
    lines: List[str] = []
    for name, value in t.properties or ():
        # optionality is carried by the "?" suffix, not by an undefined union member
        optional = "?" if value.is_optional else ""
        rendered = _render(value, level + 1, options, hidden=frozenset({UNDEFINED_KIND}))
        lines.append(f"{options.indent * level}{name}{optional}{options.property_separator}{rendered}")
    closing = options.indent * (level - 1)
    return "{\n" + ",\n".join(lines) + "\n" + closing + "}"


def _render_array(t: InferredType, level: int, options: RenderOptions) -> str:
    elements = t.elements or ()
    joined = " | ".join(_render(e, level, options) for e in elements)
    if len(elements) != 1:
        joined = f"({joined})"
    return f"{joined}[]"


def _render(
    t: InferredType,
    level: int,
    options: RenderOptions,
    hidden: FrozenSet[str] = frozenset(),
) -> str:
    pieces = [
        options.unknown_marker if marker == UNKNOWN_KIND else marker
        for marker in t.markers
        if marker not in hidden
    ]
    if t.properties is not None:
        pieces.append(_render_object(t, level, options))
    if t.elements is not None:
        pieces.append(_render_array(t, level, options))
    return " | ".join(p for p in pieces if p)


def render_type(t: InferredType, level: int = 1, options: Optional[RenderOptions] = None) -> str:
    """Render ``t`` as TypeScript type text.

    ``level`` is the nesting depth of the object block being rendered: its
    properties are indented ``level`` times and its closing brace
    ``level - 1`` times. Array elements render at the level of their array.
    """
    return _render(t, level, options or _DEFAULT_OPTIONS)


def render_declaration(t: InferredType, options: Optional[RenderOptions] = None) -> str:
    """Wrap the rendered type as ``export type Data = ...;``."""
    options = options or _DEFAULT_OPTIONS
    prefix = "export " if options.export else ""
    return f"{prefix}type {options.type_name} = {render_type(t, options=options)};"
