import json
import logging
import sys
from typing import TextIO

_console_handler: logging.Handler | None = None
_previous_level: int | None = None


class CustomJsonFormatter(logging.Formatter):
    def __init__(self, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        record_dict = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "message": record.getMessage(),
        }

        # Include standard extra fields
        if hasattr(record, "config_path"):
            record_dict["config_path"] = record.config_path  # type: ignore[attr-defined]

        if record.exc_info:
            record_dict["exception"] = self.formatException(record.exc_info)

        return json.dumps(record_dict, ensure_ascii=False)


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """
    Setup structured logging with JSON formatting on the console.

    Args:
        level: Logging level name (default: "INFO"). Unknown names fall back to INFO.
        stream: Stream for the console handler (default: stderr)
    """
    global _console_handler, _previous_level

    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root_logger = logging.getLogger()
    if _previous_level is None:
        _previous_level = root_logger.level
    root_logger.setLevel(log_level)

    # Replace the handler from a previous call (e.g., during tests)
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(CustomJsonFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)
    _console_handler = console_handler


def shutdown_logging() -> None:
    """Detach the console handler installed by setup_logging and restore the root level."""
    global _console_handler, _previous_level

    if _console_handler is None:
        return
    root_logger = logging.getLogger()
    root_logger.removeHandler(_console_handler)
    _console_handler.flush()
    _console_handler = None
    if _previous_level is not None:
        root_logger.setLevel(_previous_level)
        _previous_level = None


def get_logger(name: str) -> logging.Logger:
    """
    Convenience method for retrieving a logger
    """
    return logging.getLogger(name)
