# pricehunt/config/logging_config.py

"""Per-run timestamped logging configuration for pricehunt.

Each launch creates a dedicated log file inside ``logs/`` named after
the launch timestamp (e.g. ``logs/run_20261019_153045.log``).  Every
``pricehunt.*`` logger routes through it.

Page scrapes run in worker threads, so the detailed format carries the
thread name to tell concurrent pages apart.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from pricehunt.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.DEBUG) -> Path:
    """Attach the per-run file and console handlers to ``pricehunt``.

    Args:
        level: Level for the project logger and its file handler.

    Returns:
        The :class:`~pathlib.Path` to the log file for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    project_logger = logging.getLogger("pricehunt")
    project_logger.setLevel(level)

    # Repeated calls (tests, embedding callers) keep the first handlers
    if project_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    project_logger.addHandler(file_handler)
    project_logger.addHandler(console_handler)

    project_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
