from __future__ import annotations

import uuid
from pathlib import Path
from typing import Any, Dict, Optional, Union

from typeshape.connectors.json_file import JsonFileConnector
from typeshape.core.logger import configure_root_logger, get_logger, push_run_id, reset_run_id
from typeshape.models.pipeline_config import PipelineConfig
from typeshape.models.render_options import RenderOptions
from typeshape.pipeline import infer_declaration
from typeshape.sinks.declaration_file import DeclarationFileSink

logger = get_logger(__name__)


class DeclarationOrchestrator:
    """
    Runs the file-based flow: read samples, infer the declaration, write it.

    Example:
        >>> orchestrator = DeclarationOrchestrator()
        >>> result = orchestrator.run({"input_path": "data.json", "output_path": "data.d.ts"})
        >>> result["status"]
        'success'
    """

    def __init__(self, run_id: Optional[Union[str, int]] = None):
        """
        Args:
            run_id: Identifier attached to every log line of a run. A UUID is
                    generated when not provided.
        """
        self.run_id = str(run_id) if run_id is not None else str(uuid.uuid4())

    def run(self, config: Union[PipelineConfig, Dict[str, Any]]) -> Dict[str, Any]:
        cfg = config if isinstance(config, PipelineConfig) else PipelineConfig.model_validate(config)
        configure_root_logger(cfg.log_level)

        token = push_run_id(self.run_id)
        try:
            logger.info(f"Inferring declaration: {cfg.input_path} -> {cfg.output_path}")
            samples = JsonFileConnector(cfg.input_path).extract()
            declaration = infer_declaration(samples, cfg.render)
            audit = DeclarationFileSink(cfg.output_path).write(declaration)
            logger.info("Run completed with status: success")
            return {
                "status": "success",
                "run_id": self.run_id,
                "sample_count": len(samples),
                "declaration": declaration,
                "sink": audit,
            }
        finally:
            reset_run_id(token)


def read_type_from_data_file(
    file_path: Union[str, Path],
    output_path: Union[str, Path],
    options: Optional[RenderOptions] = None,
) -> str:
    """Infer the declaration for the samples in ``file_path`` and write it to ``output_path``."""
    config = PipelineConfig(
        input_path=str(file_path),
        output_path=str(output_path),
        render=options or RenderOptions(),
    )
    return DeclarationOrchestrator().run(config)["declaration"]
