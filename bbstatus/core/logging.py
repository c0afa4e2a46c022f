"""
Centralized logging configuration.

Notifier messages go to two places: the process log configured here and the
console of the build being reported on, which the orchestrator hands over as
a text stream.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure notifier-wide logging."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=level,
        stream=sys.stdout,
    )
    # httpx logs every request at INFO, including the token exchange
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


def console_print(console: TextIO | None, message: str) -> None:
    """Write one line to the build console, if the orchestrator gave us one."""
    if console is None:
        return
    try:
        console.write(f"{message}\n")
        console.flush()
    except (OSError, ValueError) as e:
        logging.getLogger(__name__).info(f"Could not write to build console: {e}")
