"""
Logging setup shared by the API server and the console front‑end.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  The chatty ``urllib3`` connection pool
logger used by ``requests`` is capped at WARNING so that DEBUG runs of
the console client stay readable.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("urllib3", "urllib3.connectionpool")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    noisy: Iterable[str] = NOISY_LOGGERS,
) -> bool:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path of a file to mirror log records to.  Resolved relative to
        the current working directory.
    noisy : Iterable[str]
        Logger names whose level is raised to WARNING.

    Returns
    -------
    bool
        ``False`` if the root logger already had handlers and nothing
        was changed, ``True`` otherwise.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in noisy:
        logging.getLogger(name).setLevel(logging.WARNING)
    return True
