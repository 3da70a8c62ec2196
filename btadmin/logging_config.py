"""Logging configuration for btadmin"""

import logging
import sys
import time


class MillisecondFormatter(logging.Formatter):
    """Custom formatter that includes milliseconds in timestamps"""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format time with milliseconds"""
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt.replace('.%f', ''), ct)
            return f"{s}.{int(record.msecs):03d}"
        else:
            t = time.strftime("%Y-%m-%d %H:%M:%S", ct)
            return f"{t}.{int(record.msecs):03d}"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    quiet: bool = False
) -> logging.Logger:
    """
    Set up logging configuration

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        quiet: Only show warnings and errors on the console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("btadmin")
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    if quiet:
        console_handler.setLevel(logging.WARNING)
    else:
        console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(logging.Formatter(fmt="%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = MillisecondFormatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
        # The file always records DEBUG, the console keeps its own threshold
        logger.setLevel(logging.DEBUG)

    # Don't propagate to root logger
    logger.propagate = False

    return logger


def get_logger(name: str = "btadmin") -> logging.Logger:
    """
    Get a logger instance

    Args:
        name: Logger name (defaults to main app logger)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
