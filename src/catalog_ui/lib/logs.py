"""
Logging utilities for the Catalog UI.

Every module grabs its logger with ``LOG = logs.logger(__file__)`` so log
lines carry the short module name instead of the full path.
"""

import logging
import os
from pathlib import Path

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def logger(name: str) -> logging.Logger:
    """
    Return the logger for a module, configuring it on first use.

    Args:
        name: Logger name or a module's __file__ path.

    Returns:
        Logger writing to stderr at LOG_LEVEL.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem

    log = logging.getLogger(f"catalog_ui.{name}")

    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)

    return log
