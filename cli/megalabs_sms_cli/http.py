from __future__ import annotations

from megalabs_sms import ClientConfig, MegalabsSmsClient

from .config import AppConfig, resolve_credentials
from .logging_ import client_logger


def make_client(
    cfg: AppConfig,
    *,
    api_user: str | None = None,
    api_password: str | None = None,
    sleep_time: float | None = None,
    open_timeout: float | None = None,
    read_timeout: float | None = None,
    success_stub: bool = False,
    error_stub: bool = False,
) -> MegalabsSmsClient:
    user, password = resolve_credentials(cfg, api_user=api_user, api_password=api_password)
    return MegalabsSmsClient.from_config(
        ClientConfig(
            api_user=user,
            api_password=password,
            sleep_time=cfg.sleep_time if sleep_time is None else sleep_time,
            success_stub=success_stub,
            error_stub=error_stub,
            logger=client_logger(),
            open_timeout=cfg.open_timeout if open_timeout is None else open_timeout,
            read_timeout=cfg.read_timeout if read_timeout is None else read_timeout,
        )
    )
