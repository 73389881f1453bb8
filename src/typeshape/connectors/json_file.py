from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from typeshape.core.exceptions import ConnectorError
from typeshape.core.logger import get_logger

logger = get_logger(__name__)


class JsonFileConnector:
    """
    Reads samples from a UTF-8 JSON file whose top level is an array.

    I/O and JSON parse errors propagate as-is (FileNotFoundError,
    json.JSONDecodeError, ...); only a well-formed document of the wrong
    shape raises ConnectorError.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def extract(self) -> List[Any]:
        logger.info(f"Reading samples from {self.path}")
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ConnectorError(
                f"Expected a JSON array of samples in {self.path}, got {type(data).__name__}"
            )
        logger.info(f"Loaded {len(data)} samples")
        return data
