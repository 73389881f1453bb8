from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union

from typeshape.core.logger import get_logger

logger = get_logger(__name__)


class DeclarationFileSink:
    """
    Writes a rendered declaration to a local path.

    Existing content is overwritten in place; there is no temp file and no
    atomic rename. Missing parent directories are created.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, declaration: str) -> Dict[str, Any]:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = declaration.encode("utf-8")
        with open(self.path, "wb") as f:
            f.write(content)
        logger.info(f"Wrote declaration to {self.path} ({len(content)} bytes)")
        return {
            "written_at_utc": datetime.now(timezone.utc).isoformat(),
            "target_location": str(self.path),
            "status": "success",
            "bytes_written": len(content),
        }
