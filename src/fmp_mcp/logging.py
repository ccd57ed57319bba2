"""Structured logging configuration for the FMP MCP server.

- structlog for structured console/JSON logging
- Context propagation via contextvars (service, version, tool)
- Everything goes to stderr: stdout carries the MCP stdio protocol
- Silences noisy library loggers (httpx, httpcore, asyncio)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

_SECRET_KEYS = frozenset({"apikey", "api_key", "fmp_api_key"})


def _redact_secrets(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor that masks credential values wherever they appear as keys."""
    for key in _SECRET_KEYS & event_dict.keys():
        event_dict[key] = "***"
    params = event_dict.get("params")
    if isinstance(params, dict) and _SECRET_KEYS & params.keys():
        event_dict["params"] = {
            k: ("***" if k in _SECRET_KEYS else v) for k, v in params.items()
        }
    return event_dict


def setup_logging(
    service_name: str,
    service_version: str = "1.0.0",
    log_level: str = "INFO",
    log_format: str = "console",
) -> None:
    """Configure structured logging for the server process.

    Args:
        service_name: Name reported in every entry (e.g., "fmp-mcp-server")
        service_version: Version reported in every entry
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format - "json" for machine ingestion, "console" for humans
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        _redact_secrets,
    ]

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # No colours: stderr of a stdio server usually ends up in a host's log file
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=service_name,
        version=service_version,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with optional name binding.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        A lazy structlog logger; module-level loggers created before
        setup_logging() still pick up its configuration
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def bind_context(**kwargs: Any) -> None:
    """Bind context variables to all subsequent logs (e.g. the tool being served)."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific context variables.

    Args:
        keys: Names of context variables to remove
    """
    structlog.contextvars.unbind_contextvars(*keys)
