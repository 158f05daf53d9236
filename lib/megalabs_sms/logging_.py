from __future__ import annotations

import logging
from typing import Protocol

LOG_PREFIX = "[MegalabsSms] "


class SmsLogger(Protocol):
    def info(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...


class NullLogger:
    def info(self, msg: str) -> None:
        return None

    def warn(self, msg: str) -> None:
        return None

    def error(self, msg: str) -> None:
        return None


class StdlibLogger:
    """Exposes a `logging.Logger` through the info/warn/error interface."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger("megalabs_sms")

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warn(self, msg: str) -> None:
        self._logger.warning(msg)

    def error(self, msg: str) -> None:
        self._logger.error(msg)


def log_message(message: str) -> str:
    return f"{LOG_PREFIX}{message}"
