from __future__ import annotations

import httpx
import pytest

from megalabs_sms import ClientConfig, MegalabsSmsClient
from megalabs_sms.transport import Transport


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, msg: str) -> None:
        self.records.append(("info", msg))

    def warn(self, msg: str) -> None:
        self.records.append(("warn", msg))

    def error(self, msg: str) -> None:
        self.records.append(("error", msg))


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_client(logger):
    """Build a client whose HTTP calls go to `handler` instead of the network."""
    http_clients: list[httpx.Client] = []

    def _make(handler, **options) -> MegalabsSmsClient:
        options.setdefault("logger", logger)
        cfg = ClientConfig.from_options("test_user", "test_password", **options)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return MegalabsSmsClient.from_config(cfg, transport=Transport(cfg, http_client=http_client))

    yield _make
    for http_client in http_clients:
        http_client.close()
