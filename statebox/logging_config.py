"""
Structured logging configuration.

Emits both human-readable and JSON logs. Store records carry:
- Store name
- Sequence number of the applied action
- Action type
- Latency of the dispatch
"""
from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "ts": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if getattr(record, "store", None):
            log_data["store"] = record.store
        if getattr(record, "seq", None) is not None:
            log_data["seq"] = record.seq
        if getattr(record, "action_type", None):
            log_data["action"] = record.action_type
        if getattr(record, "latency_ms", None) is not None:
            log_data["latency_ms"] = record.latency_ms
        if getattr(record, "extra_data", None):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable format with colors."""

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S.%f")[:-3]
        level = record.levelname[:4]

        prefix_parts = [f"{timestamp} {level}"]

        if getattr(record, "store", None):
            prefix_parts.append(f"[{record.store}]")
        if getattr(record, "seq", None) is not None:
            prefix_parts.append(f"seq={record.seq}")
        if getattr(record, "action_type", None):
            prefix_parts.append(f"action={record.action_type}")

        prefix = " ".join(prefix_parts)
        message = record.getMessage()

        if getattr(record, "latency_ms", None) is not None:
            message = f"{message} ({record.latency_ms:.3f}ms)"

        line = f"{prefix}: {message}"

        if self.use_colors and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, "")
            line = f"{color}{line}{self.RESET}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        return line


class StructuredLogger(logging.Logger):
    """Logger with structured logging methods."""

    def _log_structured(
        self,
        level: int,
        msg: str,
        store: Optional[str] = None,
        seq: Optional[int] = None,
        action_type: Optional[str] = None,
        latency_ms: Optional[float] = None,
        **extra,
    ) -> None:
        """Log with structured data."""
        if not self.isEnabledFor(level):
            return
        record = self.makeRecord(
            self.name, level, "", 0, msg, (), None
        )
        record.store = store
        record.seq = seq
        record.action_type = action_type
        record.latency_ms = latency_ms
        record.extra_data = extra
        self.handle(record)

    def event(
        self,
        action_type: str,
        msg: str,
        **kwargs,
    ) -> None:
        """Log an applied action."""
        self._log_structured(
            logging.INFO,
            msg,
            action_type=action_type,
            **kwargs,
        )

    def latency(
        self,
        operation: str,
        latency_ms: float,
        **kwargs,
    ) -> None:
        """Log a latency measurement."""
        self._log_structured(
            logging.DEBUG,
            f"{operation} completed",
            latency_ms=latency_ms,
            **kwargs,
        )


def configure_logging(
    level: str = "INFO",
    log_dir: Optional[str] = None,
    json_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files
        json_file: Path for JSON logs (in log_dir if relative)
        max_bytes: Max size per log file
        backup_count: Number of backup files to keep
    """
    logging.setLoggerClass(StructuredLogger)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Close and clear existing handlers
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root_logger.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        human_path = os.path.join(log_dir, "statebox.log")
        human_handler = RotatingFileHandler(
            human_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        human_handler.setFormatter(HumanFormatter(use_colors=False))
        root_logger.addHandler(human_handler)

        json_path = json_file or "statebox.json.log"
        if not os.path.isabs(json_path):
            json_path = os.path.join(log_dir, json_path)

        json_handler = RotatingFileHandler(
            json_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        json_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(json_handler)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger.

    Raises:
        TypeError: `name` was already created as a plain Logger
    """
    previous = logging.getLoggerClass()
    logging.setLoggerClass(StructuredLogger)
    try:
        log = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)

    if not isinstance(log, StructuredLogger):
        raise TypeError(f"Logger {name!r} already exists as {type(log).__name__}")
    return log
