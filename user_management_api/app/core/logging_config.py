"""
Logging configuration for the application.

``setup_logging`` attaches a console handler and, optionally, a UTF‑8
file handler to the root logger.  The handlers it installs carry a
recognisable name, so a second call (for instance from another
``create_app``) is a no‑op while handlers added by other tools, such
as pytest's log capture, do not prevent configuration.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_PREFIX = "user_management_api"


def _own_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to, resolved relative to the
        current working directory.  If omitted, only the console
        handler is added.
    """
    root = logging.getLogger()
    if _own_handlers(root):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.set_name(f"{HANDLER_PREFIX}.{type(handler).__name__}")
        handler.setFormatter(formatter)
        root.addHandler(handler)
