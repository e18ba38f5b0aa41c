"""Structured logging for build passes.

structlog events are routed through stdlib ``logging`` so every configured
output gets its own handler, level and renderer. While a build runs, its
``build_id`` is attached to each event.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from uniqname.config.models import LoggingConfig, LogOutputConfig

_build_id: ContextVar[str | None] = ContextVar("build_id", default=None)

# First file output of the active configuration, for "see log" pointers
_log_file: Path | None = None

_CONSOLE_DESTINATIONS = ("stderr", "stdout")


def get_build_id() -> str | None:
    return _build_id.get()


def set_build_id(build_id: str | None = None) -> str:
    """Start a build correlation scope, generating an ID unless one is given."""
    bid = build_id or uuid4().hex[:12]
    _build_id.set(bid)
    return bid


def clear_build_id() -> None:
    _build_id.set(None)


def get_log_file_path() -> Path | None:
    """File receiving logs under the current configuration, if any."""
    return _log_file


def _add_build_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    bid = _build_id.get()
    if bid is not None:
        event_dict.setdefault("build_id", bid)
    return event_dict


def _level(name: str | None, fallback: int) -> int:
    if name is None:
        return fallback
    return logging.getLevelNamesMapping().get(name.upper(), fallback)


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "INFO",
) -> None:
    """Install handlers for every configured output.

    Without ``config`` a single stderr output is set up from ``json_format``
    and ``level``. Calling again replaces the previous handlers.
    """
    global _log_file
    from uniqname.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )
    root_level = _level(config.level, logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_build_id,  # type: ignore[list-item]
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers are bound at import time; keep them following reconfiguration
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.setLevel(root_level)

    _log_file = None
    for output in config.outputs:
        handler = _handler(output)
        handler.setLevel(_level(output.level, root_level))
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=_renderer(output),
                foreign_pre_chain=pre_chain,
            )
        )
        root.addHandler(handler)
        if output.destination not in _CONSOLE_DESTINATIONS and _log_file is None:
            _log_file = Path(output.destination)


def _handler(output: LogOutputConfig) -> logging.Handler:
    if output.destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if output.destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def _renderer(output: LogOutputConfig) -> structlog.types.Processor:
    if output.format == "json":
        return structlog.processors.JSONRenderer()
    colors = output.destination in _CONSOLE_DESTINATIONS and sys.stderr.isatty()
    return structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger bound to ``name`` (shown as the ``logger`` field)."""
    logger = structlog.get_logger()
    return logger.bind(logger=name) if name else logger  # type: ignore[no-any-return]
