"""
Run log

File logger for the experiment's log file.
"""

import logging
import os
from typing import Optional

LOGGER_NAME = "bootstrap_se.run"
LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def setup_run_logger(
    log_file: Optional[str] = None, level: int = logging.INFO
) -> logging.Logger:
    """
    Setup the run logger with a file handler

    Handlers of a previous run are closed and removed, so each run writes
    only to its own log file. Messages are appended to an existing file.

    Args:
        log_file: Log file path (no file output if None or empty)
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    close_run_logger(logger)

    if log_file:
        dir_path = os.path.dirname(log_file)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        )
        logger.addHandler(file_handler)
    else:
        logger.addHandler(logging.NullHandler())

    return logger


def close_run_logger(logger: logging.Logger) -> None:
    """Close and remove every handler of the logger"""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
