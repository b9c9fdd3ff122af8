"""
Logging setup.

Call setup_logging() once at startup; modules use logging.getLogger(__name__).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def setup_logging(debug: bool = False) -> None:
    """Configure the root logger. Safe to call more than once."""
    global _configured
    level = logging.DEBUG if debug else logging.INFO
    if _configured:
        logging.getLogger().setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)

    # pymongo is chatty at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    _configured = True
