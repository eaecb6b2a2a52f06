"""Logging configuration for the scorer.

Console output goes to stderr so stdout carries nothing but the score
sheet (or its JSON form).
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler.addFilter(lambda record: record.name.startswith("fllscorer"))
    return handler


def _file_handler(log_dir: str) -> logging.FileHandler:
    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)

    log_file = path / f"score_{datetime.now():%Y%m%d_%H%M%S}.log"
    handler = logging.FileHandler(log_file)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%H:%M:%S"))
    return handler


def setup_logger(
    verbose: bool = False, save_to_file: bool = False, log_dir: str = "data/scores"
) -> logging.Logger:
    """
    Configure the root logger for a scoring run.

    Args:
        verbose: Show DEBUG records (every raised warning) on the console
        save_to_file: Also keep a timestamped log file under ``log_dir``
        log_dir: Directory for the log file

    Returns:
        The configured root logger
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    root.handlers.clear()
    root.addHandler(_console_handler(verbose))

    if save_to_file:
        try:
            handler = _file_handler(log_dir)
        except OSError as e:
            root.error(f"Cannot write log file in {log_dir}: {e}")
        else:
            root.addHandler(handler)
            root.info(f"Logging to file: {handler.baseFilename}")

    return root
