"""Centralized logging configuration for sc-parser.

Standard Python logging with structured text and JSON output. Extra fields
passed to log calls are appended to every record.
"""

import json
import logging
import logging.handlers

from pathlib import Path

from sc_parser.config import CONFIG


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_log_directory() -> Path:
    """Get the log directory path, creating it if necessary."""
    log_dir = CONFIG.effective_log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_log_level() -> int:
    """Get the log level from configuration (defaults to INFO)."""
    return getattr(logging, CONFIG.log_level, logging.INFO)


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter supporting extra fields.

    Format: TIMESTAMP | LEVEL | MODULE | MESSAGE | key=value ...
    Extra fields added to LogRecord are appended as key=value pairs.
    """

    STANDARD_FIELDS = {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "exc_info",
        "exc_text",
        "stack_info",
        "asctime",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)
        extra_fields = [f"{k}={v}" for k, v in record.__dict__.items() if k not in self.STANDARD_FIELDS]

        return f"{base_msg} | {' | '.join(extra_fields)}" if extra_fields else base_msg


class JSONFormatter(logging.Formatter):
    """JSON log formatter for machine-readable logs."""

    EXCLUDE_FIELDS = StructuredFormatter.STANDARD_FIELDS

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.EXCLUDE_FIELDS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def _rotating_handler(path: Path, formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        interval=1,
        backupCount=CONFIG.log_retention_days,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.suffix = "%Y-%m-%d"
    return handler


def setup_logging():
    """Set up logging with structured formatters and rotation."""
    log_dir = get_log_directory()
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    # Human-readable text log
    root_logger.addHandler(
        _rotating_handler(
            log_dir / "server.log",
            StructuredFormatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"),
            log_level,
        )
    )

    # JSON log
    root_logger.addHandler(
        _rotating_handler(
            log_dir / "server.json",
            JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S"),
            log_level,
        )
    )

    # Console handler writes to stderr; stdout carries the MCP stdio transport
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    root_logger.info(f"Logging initialized: {log_dir}")
