"""Logging setup shared by the API and the command line."""

import logging
import sys
from typing import Optional

from interest_backend.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured

    if level is None:
        level = get_settings().log_level

    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
