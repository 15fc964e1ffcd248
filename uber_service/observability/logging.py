from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _renderer(fmt: str) -> Any:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    raise ValueError(f"Unknown log format: {fmt!r}")


def _shared_processors() -> list[Any]:
    # Applied to structlog calls and to foreign stdlib records alike.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _attach(handler: logging.Handler, level: int) -> None:
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    # Server loggers write through the same handler instead of uvicorn's defaults.
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = [handler]
        server_logger.propagate = False
        server_logger.setLevel(level)


def configure_logging(level: int | str = logging.INFO, fmt: str = "json") -> None:
    """Route structlog and stdlib logging to stdout, one record per line.

    `fmt` is "json" or "console". Calling again replaces the handler, so the
    latest call wins. Raises ValueError for an unknown level name or format.
    """

    renderer = _renderer(fmt)
    resolved_level = _resolve_level(level)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared))
    _attach(handler, resolved_level)


def get_logger(name: str, **fields: Any) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name).bind(**fields)
