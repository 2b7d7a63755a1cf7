"""
Logging configuration for the Book Store API.

``setup_logging`` is called by ``create_app`` with the configured
settings and again by ``run.py`` when ``--log-level`` is given on the
command line.  The first call attaches a console handler (plus a file
handler when a log file is configured); later calls only change the
level and add a file handler for a log file not seen before.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_HANDLER_NAME = "book_store_console"


def _file_handler_name(log_path: Path) -> str:
    return f"book_store_file:{log_path}"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Configure the application logger and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.  Applied on every call.
    logfile : Optional[str]
        Path of a file to log to in addition to the console.
    logger_name : Optional[str]
        Logger to configure; the root logger when omitted.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    names = {handler.get_name() for handler in logger.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER_NAME not in names:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if _file_handler_name(log_path) not in names:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(_file_handler_name(log_path))
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
