from __future__ import annotations

"""
Logging Infrastructure.

Diagnostics for a single short-lived command run. Handlers are attached to
the ``wordtracker`` package logger, never to the root logger, so reports on
stdout stay clean and host applications keep control of their own logging:
- stderr carries warnings and errors (or more with ``-v``/``--debug``);
- an optional rotating file keeps a history across runs.

Handlers write synchronously; a run is short and the file is small.
"""

import logging
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from wordtracker.infra.fs import ensure_parent_dir

# Package logger every module logger (``wordtracker.*``) propagates into
APP_LOGGER_NAME: str = __name__.split(".")[0]

# Marks handlers installed here, so reconfiguring never touches foreign ones
_HANDLER_TAG_ATTR: str = "_wordtracker_handler"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one run.

    Attributes:
        level: Level name; unknown names fall back to WARNING.
        log_file: Optional rotating log file, appended across runs.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to it.
    """
    level: str = "WARNING"
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2

    console_fmt: str = "wordtracker: %(levelname)s: %(message)s"
    file_fmt: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Attach stderr (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers of the previous call, so tests and
    repeated CLI invocations in one process never duplicate output. A log
    file that cannot be opened is reported on stderr and skipped; the run
    itself is never aborted by logging.

    Returns:
        logging.Logger: The configured ``wordtracker`` logger.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    _detach_handlers(app_logger)
    app_logger.setLevel(_parse_level(cfg.level))

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(cfg.console_fmt))
    _attach(app_logger, console)

    if cfg.log_file:
        try:
            ensure_parent_dir(cfg.log_file)
            file_handler = RotatingFileHandler(
                cfg.log_file,
                maxBytes=cfg.max_bytes,
                backupCount=cfg.backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            app_logger.warning(f"Cannot open log file '{cfg.log_file}': {e}")
        else:
            file_handler.setFormatter(logging.Formatter(cfg.file_fmt))
            _attach(app_logger, file_handler)

    return app_logger


def shutdown_logging() -> None:
    """Flush and close the handlers installed by ``configure_logging``."""
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    _detach_handlers(app_logger)
    app_logger.setLevel(logging.NOTSET)


def installed_handlers() -> List[logging.Handler]:
    """Handlers currently attached by this module."""
    return [h for h in logging.getLogger(APP_LOGGER_NAME).handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def _attach(app_logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    app_logger.addHandler(handler)


def _detach_handlers(app_logger: logging.Logger) -> None:
    for handler in list(app_logger.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            app_logger.removeHandler(handler)
            handler.flush()
            handler.close()


def _parse_level(level: Optional[str]) -> int:
    value = logging.getLevelName(str(level or "").strip().upper())
    return value if isinstance(value, int) else logging.WARNING
