from __future__ import annotations

import dataclasses

import pytest

from megalabs_sms import ClientConfig, InvalidArgumentError, MegalabsSmsClient
from megalabs_sms.config_types import validate_timing


def test_defaults() -> None:
    cfg = ClientConfig(api_user="user", api_password="secret")

    assert cfg.sleep_time == 0
    assert cfg.success_stub is False
    assert cfg.error_stub is False
    assert cfg.logger is None
    assert cfg.open_timeout == 5
    assert cfg.read_timeout == 10


@pytest.mark.parametrize("api_user", [None, "", "   "])
def test_blank_api_user_rejected(api_user) -> None:
    with pytest.raises(InvalidArgumentError, match="api_user is required"):
        MegalabsSmsClient(api_user, "secret")


@pytest.mark.parametrize("api_password", [None, "", "\t"])
def test_blank_api_password_rejected(api_password) -> None:
    with pytest.raises(InvalidArgumentError, match="api_password is required"):
        MegalabsSmsClient("user", api_password)


def test_negative_sleep_time_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="sleep_time must be >= 0"):
        MegalabsSmsClient("user", "secret", sleep_time=-1)


@pytest.mark.parametrize("key", ["open_timeout", "read_timeout"])
@pytest.mark.parametrize("value", [0, -2.5])
def test_non_positive_timeouts_rejected(key, value) -> None:
    with pytest.raises(InvalidArgumentError, match=f"{key} must be > 0"):
        ClientConfig.from_options("user", "secret", **{key: value})


def test_unknown_option_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="unknown option"):
        ClientConfig.from_options("user", "secret", retries=3)


def test_invalid_argument_is_value_error() -> None:
    with pytest.raises(ValueError):
        ClientConfig(api_user="", api_password="secret")


def test_config_is_frozen() -> None:
    cfg = ClientConfig(api_user="user", api_password="secret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.sleep_time = 3  # type: ignore[misc]


def test_missing_timeout_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="open_timeout must be > 0"):
        ClientConfig(api_user="user", api_password="secret", open_timeout=None)  # type: ignore[arg-type]


def test_validate_timing_skips_unset_values() -> None:
    validate_timing(None, None, None)
    validate_timing(sleep_time=0, open_timeout=0.1, read_timeout=1)

    with pytest.raises(InvalidArgumentError, match="sleep_time must be >= 0"):
        validate_timing(sleep_time=-0.5)
