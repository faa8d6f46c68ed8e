"""Logger set-up for the SDK: console or rotating file output."""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

TRACE = 5
OFF = logging.CRITICAL + 10

_MAX_FILE_SIZE = 1048576 * 5
_MAX_FILES = 10
_FORMAT = (
    "[%(asctime)s:%(msecs)03d][%(thread)d][%(levelname)s][%(name)s]"
    "[%(funcName)s:%(lineno)d] %(message)s"
)
_DATE_FORMAT = "%b %m, %Y][%H:%M:%S"

_log = logging.getLogger(__name__)


class Severity(enum.Enum):
    trace = "trace"
    debug = "debug"
    info = "info"
    warn = "warn"
    err = "err"
    critical = "critical"
    off = "off"
    n_levels = "n_levels"


class Sink(enum.Enum):
    console = "console"
    rotating = "rotating"


@dataclass(frozen=True)
class LogConfig:
    """Settings for a logger: its name, minimum severity and output."""

    log_name: str = "casper_sdk"
    severity: Severity = Severity.info
    sink: Sink = Sink.console


_LEVELS = {
    Severity.trace: TRACE,
    Severity.debug: logging.DEBUG,
    Severity.info: logging.INFO,
    Severity.warn: logging.WARNING,
    Severity.err: logging.ERROR,
    Severity.critical: logging.CRITICAL,
    Severity.off: OFF,
    Severity.n_levels: OFF,
}


def get_level(severity) -> int:
    """Map a severity to a logging level; unknown values fall back to TRACE."""
    try:
        return _LEVELS[Severity(severity)]
    except ValueError:
        _log.error("Not correct severity %r, so TRACE will be used.", severity)
        return TRACE


class LogConfigurator:
    """Builds a named logger according to a LogConfig."""

    def __init__(self, log_name: str) -> None:
        self.log_name = log_name

    def configure(self, log_config: LogConfig) -> logging.Logger:
        """Attach the configured handler to the logger and set its level."""
        if log_config.sink is Sink.console:
            handler: logging.Handler = logging.StreamHandler(sys.stdout)
        else:
            handler = self._rotating_handler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))

        logger = logging.getLogger(self.log_name)
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        logger.addHandler(handler)
        logger.setLevel(get_level(log_config.severity))
        logger.propagate = False
        return logger

    def _rotating_handler(self) -> RotatingFileHandler:
        path = Path("logs") / f"rotating_{self.log_name}.txt"
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path, maxBytes=_MAX_FILE_SIZE, backupCount=_MAX_FILES, encoding="utf-8"
        )


def init_default(log_config: LogConfig) -> logging.Logger:
    """Configure the logger named in ``log_config`` and return it."""
    return LogConfigurator(log_config.log_name).configure(log_config)