from __future__ import annotations

import typer

from .commands import send_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="megalabs-sms",
        help="Send SMS through the Megalabs A2P API.",
        no_args_is_help=True,
    )

    app.command("send")(send_cmd.send)
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
