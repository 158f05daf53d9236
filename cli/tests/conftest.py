from __future__ import annotations

import pytest

from megalabs_sms_cli import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    monkeypatch.delenv(config.ENV_API_USER, raising=False)
    monkeypatch.delenv(config.ENV_API_PASSWORD, raising=False)
    return tmp_path
