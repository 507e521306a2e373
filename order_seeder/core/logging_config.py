"""
Logging setup for command-line runs
"""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Send package logs to stderr (or `stream`) at the given level"""
    root = logging.getLogger("order_seeder")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Re-running main() in the same process must not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
