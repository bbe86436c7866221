"""
Logging setup for the Users API.

Everything goes through the standard library root logger.  Three
sources write to it:

* ``users_api.access`` gets one combined-format line per request from
  ``core.middleware.log_requests``;
* ``users_api.app.core.middleware`` records unhandled exceptions with
  their traceback before the client receives a generic 500;
* ``users_api.app.services.user_store`` notes every create, update and
  delete.

``LOG_LEVEL`` and ``LOG_FILE`` from ``core.config`` feed
``setup_logging``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach(root: logging.Logger, handler: logging.Handler) -> None:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``level`` to the root logger and install its handlers.

    Handlers (console, plus a UTF‑8 file handler when ``logfile`` is
    given) are installed only if the root logger has none yet, so
    calling ``create_app`` repeatedly, or under pytest, does not
    duplicate output.  The level is applied on every call; unknown
    level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    _attach(root, logging.StreamHandler())
    if logfile:
        _attach(root, logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
