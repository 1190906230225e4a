"""
Logging shared by the API and the uvicorn server.

``setup_logging`` puts a console handler (and, when ``LOG_FILE`` is set,
a file handler) on the root logger and routes uvicorn's own loggers
through them.  ``LOG_LEVEL`` therefore governs server start-up and
access lines as well as record service messages, and everything ends up
in the same format and the same log file.  ``run.py`` starts uvicorn
with ``log_config=None`` so the server keeps this setup.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

CONSOLE_HANDLER = "attendance_api.console"
FILE_HANDLER = "attendance_api.file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def _install(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure application and uvicorn logging.

    Safe to call repeatedly (``create_app`` runs once per test): the
    level is reapplied every time, handlers are only added once.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a UTF-8 log file.  Its directory is created when
        missing.

    Returns
    -------
    int
        The numeric level that was applied.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not _has_handler(root, CONSOLE_HANDLER):
        _install(root, logging.StreamHandler(), CONSOLE_HANDLER)

    if logfile and not _has_handler(root, FILE_HANDLER):
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _install(root, logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER)

    # Drop uvicorn's default handlers so its lines are written once, by ours.
    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(numeric_level)
        server_logger.propagate = True

    return numeric_level
