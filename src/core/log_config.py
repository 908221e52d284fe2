"""Logging setup for the entry point. Library modules only ever call logging.getLogger(__name__)."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Send all records of at least `level` to stdout."""
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    # Calling this twice should not print every record twice
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # SQLAlchemy echoes through its own logger, keep it quiet unless asked for
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
