from __future__ import annotations

import time
from typing import Any, Mapping

from .config_types import ClientConfig
from .errors import InvalidArgumentError
from .logging_ import NullLogger, log_message
from .request import ENDPOINT, SmsMessage, build_request
from .transport import Transport

_MIXED_FORMS_MESSAGE = "use either keyword arguments or positional arguments, not both"


class MegalabsSmsClient:
    """Sends SMS through the Megalabs A2P API.

    Every call performs at most one HTTP request. Failures other than bad
    arguments are logged and reported as ``False``.
    """

    def __init__(
            self,
            api_user: str,
            api_password: str,
            *,
            transport: Transport | None = None,
            **options: Any,
    ):
        cfg = ClientConfig.from_options(api_user, api_password, **options)
        self._init(cfg, transport)

    @classmethod
    def from_config(cls, cfg: ClientConfig, *, transport: Transport | None = None) -> "MegalabsSmsClient":
        client = cls.__new__(cls)
        client._init(cfg, transport)
        return client

    def _init(self, cfg: ClientConfig, transport: Transport | None) -> None:
        self._cfg = cfg
        self._logger = cfg.logger or NullLogger()
        self._t = transport or Transport(cfg)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "MegalabsSmsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def send_sms(
            self,
            sender: str | None = None,
            to: str | None = None,
            message: str | None = None,
            *,
            sms: SmsMessage | Mapping[str, Any] | None = None,
    ) -> bool:
        """Send one SMS.

        Accepts either the three fields (positionally or by keyword) or a single
        ``sms`` bundle, never both.
        """
        sms = self._resolve_message(sender, to, message, sms)
        sms.validate()

        if self._cfg.error_stub:
            self._logger.warn(log_message("Stubbed error: SMS not sent"))
            return False
        if self._cfg.success_stub:
            self._logger.info(log_message("Stubbed success: SMS would be sent"))
            return True

        request = build_request(self._cfg, sms, endpoint=ENDPOINT)
        ok = self._t.send(request)
        if self._cfg.sleep_time and self._cfg.sleep_time > 0:
            time.sleep(float(self._cfg.sleep_time))
        return ok

    @staticmethod
    def _resolve_message(
            sender: str | None,
            to: str | None,
            message: str | None,
            sms: SmsMessage | Mapping[str, Any] | None,
    ) -> SmsMessage:
        if sms is None:
            return SmsMessage(sender=sender, to=to, message=message)
        if any(v is not None for v in (sender, to, message)):
            raise InvalidArgumentError(_MIXED_FORMS_MESSAGE)
        if isinstance(sms, SmsMessage):
            return sms
        if isinstance(sms, Mapping):
            return SmsMessage.from_mapping(sms)
        raise InvalidArgumentError("sms must be an SmsMessage or a mapping")
