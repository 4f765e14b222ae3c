# src/config/logging_config.py

"""Per-run logging for nft_market.

Every launch writes one DEBUG log file, ``logs/run_<timestamp>.log``,
that collects all ``nft_market.*`` records of the session.

Textual draws the interface on the terminal's stderr, so the TUI must
run without a console handler; anything written there would land on top
of the rendered screen. Headless commands (``--list``) keep a stderr
handler for WARNING and above.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

LOGGER_NAME = "nft_market"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_file: Path) -> logging.Handler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


def setup_logging(console: bool = True) -> Path:
    """Configure the ``nft_market`` logger for this run.

    Args:
        console: Also echo WARNING+ records to stderr. Pass ``False``
            when the Textual UI is about to take over the terminal.

    Returns:
        Path of the log file for this run. Repeated calls keep the
        handlers installed by the first one.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    if root_logger.handlers:
        return log_file

    root_logger.addHandler(_file_handler(log_file))
    if console:
        root_logger.addHandler(_console_handler())

    root_logger.info(
        "Logging initialised (console=%s), log file: %s", console, log_file
    )
    return log_file
