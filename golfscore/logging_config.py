"""Logging setup for the settle_round command."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def setup_logging(level: int = logging.INFO, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure the 'golfscore' logger that every module logger propagates to.

    Console output goes to stderr so stdout carries only the settlement
    JSON. With a log_dir, each run also writes golfscore_<timestamp>.log
    there at the same level.

    Returns:
        The configured 'golfscore' logger
    """
    logger = logging.getLogger('golfscore')
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'golfscore_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)
        logger.debug(f'Logging to {log_file}')

    return logger
