"""Logging setup for applications and scripts that use pychained."""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logger(
    name: Optional[str] = "pychained",
    level: int = logging.INFO,
    output: str = "console",
    log_dir: str = "./logs",
    log_file: str = "pychained.log",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Configure and return a logger.

    Args:
        name: Logger name. None configures the root logger.
        level: Level applied to the logger and its handlers.
        output: "console", "file" or "both".
        log_dir: Directory for the rotating log file.
        log_file: File name inside log_dir.
        max_bytes: Size at which the log file rotates.
        backup_count: Number of rotated files kept.

    Returns:
        The configured logger. Calling again with the same name does not add
        duplicate handlers.
    """
    if output not in {"console", "file", "both"}:
        raise ValueError(f"output must be 'console', 'file' or 'both', got {output!r}")

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if output in {"file", "both"}:
        try:
            os.makedirs(log_dir, exist_ok=True)
        except OSError as e:
            raise RuntimeError(f"Failed to create log directory {log_dir}: {e}") from e
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, log_file), maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if output in {"console", "both"}:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
