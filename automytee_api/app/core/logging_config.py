"""
Logging setup for the content API.

``setup_logging`` is called once from ``create_app``.  It installs a
console handler on the root logger and, when ``LOG_FILE`` is set, a
file handler writing to that path (parent directories are created).
With ``DEBUG`` enabled everything is logged at DEBUG level, including
the MongoDB driver; otherwise the chatty driver and HTTP-library
loggers are held at WARNING so request logs stay readable.

Handlers installed here are named, and a second call only adjusts
levels instead of stacking duplicate handlers.  Handlers owned by
someone else (uvicorn, the test runner) are left alone.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "automytee.console"
FILE_HANDLER = "automytee.file"

# Loggers that flood the output at INFO/DEBUG (pymongo logs every
# command and server-selection step).
NOISY_LOGGERS = ("pymongo", "urllib3")


def _own_handlers(root: logging.Logger):
    return [h for h in root.handlers if h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger for the service.

    ``level`` is a level name, case insensitive; unknown names fall
    back to INFO.  ``debug`` forces DEBUG for the root logger and the
    driver loggers alike.
    """
    root = logging.getLogger()
    numeric_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)

    if _own_handlers(root):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
