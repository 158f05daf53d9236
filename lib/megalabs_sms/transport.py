from __future__ import annotations

import httpx

from .config_types import ClientConfig
from .logging_ import NullLogger, log_message
from .response import ResponseInterpreter


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_client: httpx.Client | None = None):
        self._cfg = cfg
        self._logger = cfg.logger or NullLogger()
        self._interpreter = ResponseInterpreter(self._logger)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(
                connect=float(cfg.open_timeout),
                read=float(cfg.read_timeout),
                write=float(cfg.read_timeout),
                pool=float(cfg.open_timeout),
            ),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def send(self, request: httpx.Request) -> bool:
        try:
            r = self._client.send(request)
        except httpx.HTTPError as e:
            self._logger.error(log_message(f"Exception occurred: {type(e).__name__}: {e}"))
            return False

        if not r.is_success:
            self._logger.warn(log_message(f"Failed to send: HTTP {r.status_code} {r.reason_phrase}"))
            return False

        return self._interpreter.interpret(r.content)
