from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_LOG_NAME = "docreader"
DEFAULT_LOG_FILENAME = "docreader.log"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(
    *,
    app_name: str = DEFAULT_LOG_NAME,
    log_dir: Path | None = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Attach a console handler and, when log_dir is given, a DEBUG file handler
    writing to <log_dir>/docreader.log. The console shows INFO and above,
    or everything when verbose is set.

    Handlers are attached once; later calls return the same logger.
    """
    logger = logging.getLogger(app_name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_path = Path(log_dir).expanduser() / DEFAULT_LOG_FILENAME
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
