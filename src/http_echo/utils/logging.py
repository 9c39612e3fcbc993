"""
Structured logging configuration using structlog.

Text mode writes one ``[YYYY-MM-DD HH:MM:SS] message`` line per event to
stdout; JSON mode writes one JSON object per line.
"""
import logging
import sys
from pathlib import Path

import structlog

TEXT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def render_plain_line(logger, method_name: str, event_dict: dict) -> str:
    """
    Render an event as ``[timestamp] event``.

    Structured fields stay available to other renderers but are not printed
    here. A formatted exception, if any, follows on the next lines.
    """
    line = f"[{event_dict.get('timestamp', '')}] {event_dict.get('event', '')}"
    exception = event_dict.get("exception")
    if exception:
        line = f"{line}\n{exception}"
    return line


def setup_logging(
    level: str = "INFO",
    json_logs: bool = False,
    log_dir: Path | None = None
) -> None:
    """
    Configure structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON format. If False, use the text line format
        log_dir: Optional directory for file logging
    """
    if json_logs:
        timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
        renderer = structlog.processors.JSONRenderer()
    else:
        timestamper = structlog.processors.TimeStamper(fmt=TEXT_TIMESTAMP_FORMAT, utc=False)
        renderer = render_plain_line

    # Shared processors for structlog events and foreign (aiohttp) records
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # StreamHandler serializes emits, so concurrent requests never interleave lines
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(getattr(logging, level))

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "http-echo.log")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
