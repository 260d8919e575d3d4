"""
Root logger setup for the command line.
Library modules only create loggers with logging.getLogger(__name__).
"""

import logging
import sys
from typing import Optional

from .config import config


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Route engine logs to stderr and, optionally, a file under LOG_DIR.

    stdout is left alone so the JSON result can be piped.

    Args:
        log_level: Level name; defaults to config.LOG_LEVEL
        log_file: File name inside LOG_DIR
        console_output: Attach the stderr handler

    Returns:
        The root logger
    """
    level = getattr(logging, (log_level or config.LOG_LEVEL).upper())
    formatter = logging.Formatter(fmt=config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(
            logging.FileHandler(config.get_log_path(log_file), mode='a', encoding='utf-8')
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # PyMuPDF logs every object it parses at DEBUG
    for name in ('fitz', 'pymupdf'):
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger
