# cayenne/app/logging_config.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class LogDefaults:
    logger_name: str = "cayenne"  # package logger; the root logger is left alone
    level: int = logging.INFO
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


DEFAULTS = LogDefaults()


def _existing_file_handler(logger: logging.Logger, path: Path) -> Optional[logging.FileHandler]:
    target = str(path.resolve())
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == target:
            return h
    return None


def configure_file_logging(log_path: str | Path, *, level: int = DEFAULTS.level) -> logging.FileHandler:
    """
    Send the package's log records to `log_path`.

    Calling it again with the same path returns the handler already installed.
    """
    path = Path(log_path)
    pkg_logger = logging.getLogger(DEFAULTS.logger_name)

    handler = _existing_file_handler(pkg_logger, path)
    if handler is not None:
        return handler

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULTS.fmt))
    pkg_logger.addHandler(handler)

    if pkg_logger.getEffectiveLevel() > level:
        pkg_logger.setLevel(level)
    return handler
