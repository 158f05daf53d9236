from __future__ import annotations

import os

import typer
from megalabs_sms import InvalidArgumentError
from megalabs_sms.config_types import validate_timing

from .. import console
from ..config import config_path, default_config, load_config, save_config

app = typer.Typer(help="Manage local settings (~/.config/megalabs-sms/config.toml).")


def _check_timeouts(sleep_time: float | None, open_timeout: float | None, read_timeout: float | None) -> None:
    try:
        validate_timing(sleep_time, open_timeout, read_timeout)
    except InvalidArgumentError as e:
        console.err(str(e))
        raise typer.Exit(code=2)


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        api_user: str = typer.Option(..., "--user", prompt="API user", help="API user for Basic Auth."),
        api_password: str = typer.Option(
            ...,
            "--password",
            prompt="API password",
            hide_input=True,
            help="API password for Basic Auth.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.api_user = api_user.strip()
    cfg.api_password = api_password
    if not cfg.api_user or not cfg.api_password.strip():
        console.err("API user and password cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    password_state = "(set)" if cfg.api_password.strip() else "(empty)"
    console.console.print(
        f"api_user={cfg.api_user or '-'} api_password={password_state} "
        f"sleep_time={cfg.sleep_time} open_timeout={cfg.open_timeout} read_timeout={cfg.read_timeout}",
        markup=False,
    )


@app.command("set")
def set_setting(
        api_user: str | None = typer.Option(None, "--user", help="Set API user."),
        api_password: str | None = typer.Option(None, "--password", help="Set API password."),
        sleep_time: float | None = typer.Option(None, "--sleep", help="Set post-send delay, seconds."),
        open_timeout: float | None = typer.Option(None, "--open-timeout", help="Set connect timeout, seconds."),
        read_timeout: float | None = typer.Option(None, "--read-timeout", help="Set read timeout, seconds."),
):
    _check_timeouts(sleep_time, open_timeout, read_timeout)
    cfg = load_config()
    if api_user is not None:
        cfg.api_user = api_user.strip()
    if api_password is not None:
        cfg.api_password = api_password
    if sleep_time is not None:
        cfg.sleep_time = sleep_time
    if open_timeout is not None:
        cfg.open_timeout = open_timeout
    if read_timeout is not None:
        cfg.read_timeout = read_timeout
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
