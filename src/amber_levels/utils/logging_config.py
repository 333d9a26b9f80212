"""
Logging configuration for amber_levels.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from ..settings import AppSettings, LoggingSettings

PROJECT_LOGGER = "amber_levels"

CONSOLE_FORMAT = "%(asctime)s : %(levelname)-8s : %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        formatted = super().format(record)

        # Only the level name is coloured, not the message
        if record.levelname in formatted:
            formatted = formatted.replace(
                record.levelname, f"{color}{record.levelname}{reset}", 1
            )

        return formatted


class CSVFormatter(logging.Formatter):
    """Semicolon-separated formatter for the log file."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, self.datefmt)
        level = record.levelname.ljust(8)
        duration = f"{int(record.relativeCreated)} ms"
        module = record.name
        line_no = str(record.lineno)
        message = record.getMessage()

        # Standard CSV quoting
        message = message.replace('"', '""')

        return f'"{timestamp}";{level};"{duration}";"{module}";"{line_no}";"{message}"'


def _console_handler(settings: "LoggingSettings") -> logging.Handler:
    if settings.console_use_colors:
        formatter: logging.Formatter = ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)
    else:
        formatter = logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT)

    handler = logging.StreamHandler()
    handler.setLevel(getattr(logging, settings.console_log_level.upper(), logging.INFO))
    handler.setFormatter(formatter)
    return handler


def _file_handler(log_path: Path) -> logging.Handler:
    """Rotating CSV handler that always records DEBUG.

    Raises:
        OSError: If the log directory or file cannot be created
    """
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(CSVFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(settings: "AppSettings", log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Replace the root handlers with the configured console and file handlers.

    Args:
        settings: AppSettings whose ``logging`` subsystem is applied
        log_file: Overrides the configured log file location
    """
    config = settings.logging
    log_path = Path(log_file) if log_file is not None else Path(config.log_file_path)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    logging.getLogger(PROJECT_LOGGER).setLevel(logging.DEBUG)

    if config.console_logging:
        root_logger.addHandler(_console_handler(config))

    logger = logging.getLogger(__name__)
    if config.file_logging:
        try:
            root_logger.addHandler(_file_handler(log_path))
        except OSError as e:
            # Console logging still works
            logger.warning(f"Could not setup file logging: {e}")
        else:
            logger.debug(f"File logging: DEBUG at {log_path.absolute()}")

    logger.info(
        f"Logging initialized (console: {config.console_log_level if config.console_logging else 'off'})"
    )
