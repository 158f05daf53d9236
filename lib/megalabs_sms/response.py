from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .logging_ import NullLogger, SmsLogger, log_message


@dataclass(frozen=True)
class ApiResponseStatus:
    code: Any
    description: Any

    @property
    def ok(self) -> bool:
        code_ok = isinstance(self.code, int) and not isinstance(self.code, bool) and self.code == 0
        return code_ok and isinstance(self.description, str) and self.description.lower() == "ok"


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def parse_status(data: Any) -> ApiResponseStatus | None:
    status = _dig(data, "result", "status")
    if not isinstance(status, dict):
        return None
    return ApiResponseStatus(code=status.get("code"), description=status.get("description", ""))


def decode_body(raw_body: bytes | str | None) -> str:
    if raw_body is None:
        return ""
    if isinstance(raw_body, str):
        return raw_body
    return raw_body.decode("utf-8", errors="replace")


class ResponseInterpreter:
    def __init__(self, logger: SmsLogger | None = None):
        self._logger = logger or NullLogger()

    def interpret(self, raw_body: bytes | str | None) -> bool:
        """Return True only for `result.status` == {code: 0, description: "ok"}."""
        body = decode_body(raw_body)
        try:
            parsed = json.loads(body)
        except (ValueError, RecursionError) as e:
            self._logger.warn(log_message(f"Failed to parse JSON: {e}"))
            return False

        status = parse_status(parsed)
        if status is not None and status.ok:
            self._logger.info(log_message(f"Successfully sent: {body}"))
            return True

        self._logger.warn(log_message(f"Failed to send: {body}"))
        return False
