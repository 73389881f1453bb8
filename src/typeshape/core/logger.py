import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the current orchestrator run id across the call chain
_RUN_ID: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")


class _RunIdFilter(logging.Filter):
    """Logging filter that injects the run_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.run_id = _RUN_ID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | run=%(run_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _is_ours(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and any(
        isinstance(f, _RunIdFilter) for f in handler.filters
    )


def configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure the root logger and the typeshape logger.

    Root stays at INFO so that third-party libraries stay quiet; only the
    typeshape namespace follows the requested level. When level is None the
    typeshape level is left alone once configured (INFO on first call).

    Safe to call multiple times; it will not duplicate handlers.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("typeshape")

    if not any(_is_ours(h) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_build_formatter())
        handler.addFilter(_RunIdFilter())
        root.addHandler(handler)
        if root.level == logging.NOTSET or root.level > logging.INFO:
            root.setLevel(logging.INFO)
        if level is None:
            level = "INFO"

    if level is not None:
        package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str = "typeshape") -> logging.Logger:
    """Get a module-specific logger that reports the current run id."""
    configure_root_logger()
    return logging.getLogger(name)


def push_run_id(run_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current run id in context and return a token for later reset."""
    if not run_id:
        return None
    return _RUN_ID.set(run_id)


def reset_run_id(token: Optional[contextvars.Token]) -> None:
    """Reset the run id context using the provided token (if any)."""
    if token is None:
        return
    _RUN_ID.reset(token)


def current_run_id() -> str:
    return _RUN_ID.get()
