# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from config import LOG_DIR, LOG_FILE_NAME, LOG_LEVEL

ROOT_LOGGER_NAMES = ("parsing", "input_readers", "interface")


def setup_logger(log_dir: Path | None = None, level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configure logging for the cart parser packages.

    Features:
    - Daily rotating log file plus console output
    - Unified log format with timestamp and level
    - Creates the log directory automatically
    - Safe to call more than once (handlers are only attached the first time)

    Module loggers live under the package names ("parsing.cart_parser",
    "input_readers.csv_file", ...), so the handlers are attached to those
    package loggers and the "cart_parser" logger returned for app-level messages.
    """
    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    logger = logging.getLogger("cart_parser")

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_dir / LOG_FILE_NAME,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    for name in ("cart_parser",) + ROOT_LOGGER_NAMES:
        package_logger = logging.getLogger(name)
        package_logger.setLevel(level)
        package_logger.addHandler(file_handler)
        package_logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
