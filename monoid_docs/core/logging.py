"""
Logging for Monoid Docs.

Every process (HTTP server, stdio bridge, CLI) logs to stderr through the
same formatter; stdout is reserved for the stdio protocol stream.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DocsServerFormatter(logging.Formatter):
    """Single-line console format: time, level marker, message, context."""

    LEVEL_EMOJIS = {
        "DEBUG": "🔍",
        "INFO": "ℹ️",
        "WARNING": "⚠️",
        "ERROR": "❌",
        "CRITICAL": "🚨",
    }

    COLORS = {
        "DEBUG": "\033[90m",
        "INFO": "\033[36m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool | None = None):
        super().__init__()
        if use_color is None:
            use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
        self.use_color = use_color

    @staticmethod
    def render_context(context: dict[str, Any] | None) -> str:
        if not context:
            return ""
        return " (" + ", ".join(f"{key}={value}" for key, value in context.items()) + ")"

    def format(self, record: logging.LogRecord) -> str:
        marker = self.LEVEL_EMOJIS.get(record.levelname, "📝")
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        line = f"[{clock}] {marker}  {record.getMessage()}"
        line += self.render_context(getattr(record, "extra_data", None))

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        if self.use_color and record.levelname in self.COLORS:
            line = f"{self.COLORS[record.levelname]}{line}{self.RESET}"

        return line


class StructuredLogger:
    """
    Logger wrapper taking keyword context on every call.

    ``bind`` returns a child carrying fixed context (e.g. the server name of
    an organization-pinned endpoint) that is merged into every record.
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self.logger = logging.getLogger(name)
        self.context = dict(context or {})

    def bind(self, **context: Any) -> "StructuredLogger":
        return StructuredLogger(self.logger.name, {**self.context, **context})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if self.logger.isEnabledFor(level):
            self.logger.log(
                level, message, extra={"extra_data": {**self.context, **fields}}
            )


def setup_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """
    Configure the root logger for a Monoid Docs process.

    Args:
        level: Log level name, case-insensitive
        log_file: Also append plain-text records to this file
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(DocsServerFormatter())
    root.addHandler(stderr_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(file_handler)

    # uvicorn access lines duplicate the structured request log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """Structured logger for a module (``name`` is usually ``__name__``)."""
    return StructuredLogger(name)
