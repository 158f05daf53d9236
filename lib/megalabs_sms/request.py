from __future__ import annotations

import base64
import json
import re
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from .config_types import ClientConfig
from .errors import InvalidArgumentError
from .version import __version__

ENDPOINT = "https://a2p-api.megalabs.ru/sms/v1/sms"
USER_AGENT = f"megalabs-sms/{__version__}"
# E.164 numbers are at most 15 digits
MAX_PHONE_DIGITS = 15

_NON_DIGITS_RE = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class SmsMessage:
    sender: str
    to: str
    message: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SmsMessage":
        sender = data.get("from", data.get("sender"))
        return cls(sender=sender, to=data.get("to"), message=data.get("message"))

    def validate(self) -> None:
        for name, value in (("from", self.sender), ("to", self.to), ("message", self.message)):
            if value is None or not str(value).strip():
                raise InvalidArgumentError(f"{name} is required")
        digits = extract_digits(self.to)
        if not digits:
            raise InvalidArgumentError("to must contain digits")
        if len(digits) > MAX_PHONE_DIGITS:
            raise InvalidArgumentError("to is too long")


def extract_digits(value: str) -> str:
    return _NON_DIGITS_RE.sub("", str(value or ""))


def build_payload(sms: SmsMessage) -> dict[str, Any]:
    sms.validate()
    digits = extract_digits(sms.to)
    return {
        "from": sms.sender,
        "to": int(digits),
        "message": sms.message,
    }


def build_body(sms: SmsMessage) -> bytes:
    payload = build_payload(sms)
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def basic_auth_header(user: str, password: str) -> str:
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_request(cfg: ClientConfig, sms: SmsMessage, *, endpoint: str = ENDPOINT) -> httpx.Request:
    headers = {
        "Authorization": basic_auth_header(cfg.api_user, cfg.api_password),
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }
    return httpx.Request("POST", endpoint, content=build_body(sms), headers=headers)
