from __future__ import annotations

import typer
from megalabs_sms import InvalidArgumentError
from megalabs_sms.request import extract_digits

from .. import console
from ..config import load_config
from ..http import make_client


def send(
        sender: str = typer.Argument(..., metavar="FROM", help="Sender name or number."),
        to: str = typer.Argument(..., metavar="TO", help="Recipient phone number, any formatting."),
        message: str = typer.Argument(..., metavar="MESSAGE", help="Message text."),
        api_user: str | None = typer.Option(None, "--user", help="API user (overrides settings and env)."),
        api_password: str | None = typer.Option(None, "--password", help="API password (overrides settings and env)."),
        sleep_time: float | None = typer.Option(None, "--sleep", help="Seconds to wait after the request."),
        open_timeout: float | None = typer.Option(None, "--open-timeout", help="Connect timeout, seconds."),
        read_timeout: float | None = typer.Option(None, "--read-timeout", help="Read timeout, seconds."),
        stub_success: bool = typer.Option(False, "--stub-success", help="Do not call the API, report success."),
        stub_error: bool = typer.Option(False, "--stub-error", help="Do not call the API, report failure."),
        json_out: bool = typer.Option(False, "--json", help="Print result as JSON."),
):
    """Send one SMS."""
    cfg = load_config()
    try:
        client = make_client(
            cfg,
            api_user=api_user,
            api_password=api_password,
            sleep_time=sleep_time,
            open_timeout=open_timeout,
            read_timeout=read_timeout,
            success_stub=stub_success,
            error_stub=stub_error,
        )
    except InvalidArgumentError as e:
        console.err(f"Invalid settings: {e}")
        raise typer.Exit(code=2)

    try:
        sent = client.send_sms(sender, to, message)
    except InvalidArgumentError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    finally:
        client.close()

    if json_out:
        console.print_json({"ok": sent, "from": sender, "to": extract_digits(to)})
    elif sent:
        console.ok(f"SMS sent to {to}.")
    else:
        console.err("SMS was not sent. Run with -v for details.")

    if not sent:
        raise typer.Exit(code=1)
