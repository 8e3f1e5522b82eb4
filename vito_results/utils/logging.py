import logging
import sys

import structlog

from vito_results.config import get_settings


def format_context(logger, method_name, event_dict):
    """Format bound context into the event message"""
    excluded = {"level", "timestamp", "logger", "stack", "exc_info", "event"}
    context = " ".join(f"{k}={v}" for k, v in event_dict.items() if k not in excluded)

    event = event_dict.get("event", "")
    event_dict["event"] = f"{event} [{context}]" if context else event

    return event_dict


# Ends in render_to_log_kwargs, so records reach stdlib logging as plain text.
PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    format_context,
    structlog.stdlib.render_to_log_kwargs,
]


def get_logger(name: str | None = None):
    """
    Get a logger with vito_results prefix.

    The logger always runs PROCESSORS and hands the result to stdlib logging,
    whether or not structlog has been configured.

    Args:
        name: Module name (typically __name__). If None, returns root vito_results logger.

    Returns:
        A structlog logger with vito_results prefix.
    """
    if name is None:
        full_name = "vito_results"
    elif name == "vito_results" or name.startswith("vito_results."):
        full_name = name
    else:
        full_name = f"vito_results.{name}"

    # Routed through stdlib logging: silent until the host configures handlers.
    return structlog.wrap_logger(
        logging.getLogger(full_name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def setup_logging() -> None:
    """
    Setup logging for applications embedding vito_results.

    Environment variables:
        DEBUG_ALL: If set to "true" (case-insensitive), the root logger runs at DEBUG.
                   If not set, the root logger runs at WARNING.
        LOG_LEVEL: Level for the vito_results namespace (default INFO).
    """
    settings = get_settings().logging

    root_level = "DEBUG" if settings.debug_all else "WARNING"
    logging.basicConfig(
        stream=sys.stderr,
        level=root_level,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    structlog.configure(
        processors=PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.getLogger("vito_results").setLevel(settings.log_level)
