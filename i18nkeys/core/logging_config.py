"""Logging configuration for the command-line tools."""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path

# Log levels for different components
LOGGING_CONFIG = {
    # Reduce noise from libraries
    "dotenv": logging.ERROR,
    "dotenv.main": logging.ERROR,
    "pydantic": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that tints the level name when stderr is a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, use_color: bool = True) -> None:
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        code = self.LEVEL_COLORS.get(record.levelno)
        if not (self.use_color and code):
            return super().format(record)
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().format(tinted)


def setup_logging(log_file: bool = False, debug: bool = False, level: str = "WARNING") -> None:
    """Configure logging for a single tool invocation.

    The console handler writes to stderr so stdout only carries the report
    line printed by the tool.
    """
    console_level = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if (debug or log_file) else console_level)

    # Drop handlers left by an earlier call, keep anyone else's
    for handler in list(root_logger.handlers):
        if getattr(handler, "_i18nkeys", False):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        ColoredFormatter(
            "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
            datefmt="%H:%M:%S",
            use_color=sys.stderr.isatty(),
        )
    )
    console_handler._i18nkeys = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)
        log_filename = log_dir / f"i18nkeys_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=1024*1024,  # 1MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler._i18nkeys = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    for logger_name, logger_level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logger_level)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(console_level),
        "ENABLED" if log_file else "DISABLED",
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
