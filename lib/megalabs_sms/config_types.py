from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from .errors import InvalidArgumentError
from .logging_ import SmsLogger


def _blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def validate_timing(
        sleep_time: float | None = None,
        open_timeout: float | None = None,
        read_timeout: float | None = None,
) -> None:
    """Check delay and timeouts; `None` skips a value."""
    if sleep_time is not None and float(sleep_time) < 0:
        raise InvalidArgumentError("sleep_time must be >= 0")
    if open_timeout is not None and float(open_timeout) <= 0:
        raise InvalidArgumentError("open_timeout must be > 0")
    if read_timeout is not None and float(read_timeout) <= 0:
        raise InvalidArgumentError("read_timeout must be > 0")


@dataclass(frozen=True)
class ClientConfig:
    api_user: str
    api_password: str
    sleep_time: float = 0
    success_stub: bool = False
    error_stub: bool = False
    logger: SmsLogger | None = None
    open_timeout: float = 5
    read_timeout: float = 10

    def __post_init__(self) -> None:
        if _blank(self.api_user):
            raise InvalidArgumentError("api_user is required")
        if _blank(self.api_password):
            raise InvalidArgumentError("api_password is required")
        validate_timing(self.sleep_time or 0, self.open_timeout or 0, self.read_timeout or 0)

    @classmethod
    def from_options(cls, api_user: str, api_password: str, **options: Any) -> "ClientConfig":
        known = {f.name for f in fields(cls)} - {"api_user", "api_password"}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidArgumentError(f"unknown option(s): {', '.join(unknown)}")
        return cls(api_user=api_user, api_password=api_password, **options)
