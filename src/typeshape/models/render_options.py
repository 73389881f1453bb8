from __future__ import annotations

import re

from pydantic import BaseModel, field_validator

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class RenderOptions(BaseModel):
    """How an inferred type is written out as a TypeScript declaration.

    The defaults reproduce the classic output:

        export type Data = {
            name : string,
            age? : number
        };
    """

    type_name: str = "Data"
    export: bool = True
    indent: str = "\t"                  # repeated once per nesting level
    property_separator: str = " : "     # between property name and its type
    unknown_marker: str = "unknown"     # rendering of the no-information placeholder

    @field_validator("type_name")
    @classmethod
    def _type_name_is_identifier(cls, value: str) -> str:
        if not _IDENTIFIER.match(value):
            raise ValueError(f"type_name must be a valid TypeScript identifier, got {value!r}")
        return value
