from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from typeshape.models.render_options import RenderOptions


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class PipelineConfig(BaseModel):
    # --- file boundary ---
    input_path: str                     # UTF-8 JSON file holding an array of samples
    output_path: str                    # declaration file, overwritten on every run

    # --- rendering ---
    render: RenderOptions = Field(default_factory=RenderOptions)

    log_level: LogLevel = "INFO"
