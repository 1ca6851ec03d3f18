"""Structured logging configuration with structlog.

Environment variables:
- LOG_FORMAT: "json" for machine-readable lines, "console" or unset for
  human-readable output.
- LOG_LEVEL: "DEBUG", "INFO", "WARNING" (default), "ERROR", or "CRITICAL".

Logs go to stderr so that scores printed on stdout stay clean.
"""

import logging
import os
import sys
from enum import Enum
from typing import Any, MutableMapping, Optional

import structlog

_VALID_LOG_FORMATS = {"json", "console", ""}
_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _serialize_enums(
    _logger: object,
    _method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Replace Enum instances with their .name for readable log output."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.name
        elif isinstance(value, (list, tuple)):
            event_dict[key] = [v.name if isinstance(v, Enum) else v for v in value]
    return event_dict


def resolve_json_mode(value: Optional[str] = None) -> bool:
    if value is None:
        value = os.environ.get("LOG_FORMAT", "")
    value = value.lower()
    if value not in _VALID_LOG_FORMATS:
        raise ValueError(f"Invalid LOG_FORMAT={value!r}. Must be 'json', 'console', or unset.")
    return value == "json"


def resolve_log_level(value: Optional[str] = None) -> int:
    """Resolve log level name (or the LOG_LEVEL env var). Defaults to WARNING."""
    if value is None:
        value = os.environ.get("LOG_LEVEL", "WARNING")
    value = value.upper()
    if value not in _VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid LOG_LEVEL={value!r}. Must be one of {', '.join(sorted(_VALID_LOG_LEVELS))}."
        )
    return getattr(logging, value)


def _build_formatter(json_mode: bool, colors: bool = False) -> logging.Formatter:
    if json_mode:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _serialize_enums,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Logger routed through stdlib logging; silent until setup_logging() runs."""
    return structlog.get_logger(name)


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure structlog on top of the stdlib root logger.

    Arguments override LOG_LEVEL / LOG_FORMAT; invalid values raise ValueError.
    """
    json_mode = resolve_json_mode(log_format)
    level_no = resolve_log_level(level)

    _configure_structlog()

    root_logger = logging.getLogger()
    root_logger.setLevel(level_no)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(json_mode, colors=sys.stderr.isatty()))
    root_logger.addHandler(handler)


# Library default: events go to stdlib logging, which drops them until a handler is added
if not structlog.is_configured():
    _configure_structlog()
logging.getLogger("beijing_mahjong").addHandler(logging.NullHandler())
