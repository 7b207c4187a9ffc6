# src/config/logging_config.py

"""Logging for one ``main.py`` inspection.

The library layers log under ``price_tracker.<layer>`` (``parsing``,
``extractors``, ``analysis``, ``services``, ``cli``) and never attach
handlers of their own.  :func:`setup_logging` hangs two handlers off the
shared ``price_tracker`` logger:

* a file under ``logs/`` named after the inspection start time, which
  records every selector miss, price fallback and description tier
  choice at DEBUG;
* a stderr console limited to WARNING, so JSON written to stdout can
  still be piped into other tools.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

ROOT_LOGGER_NAME = "price_tracker"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | "
    "%(message)s"
)

# Logger name kept on the console to tell parse warnings from CLI errors
_CONSOLE_FORMAT = "%(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_file: Path) -> logging.FileHandler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def _console_handler() -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.WARNING)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


def setup_logging() -> Path:
    """Attach the inspection handlers to the ``price_tracker`` logger.

    Returns:
        The log file receiving this inspection's records.  When handlers
        are already attached, the file of the existing handler is
        returned and nothing new is created.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)

    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    started = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{started}.log"

    root_logger.addHandler(_file_handler(log_file))
    root_logger.addHandler(_console_handler())
    root_logger.debug("Inspection log opened at %s", log_file)

    return log_file
