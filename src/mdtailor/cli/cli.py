"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated, Optional

import typer

from mdtailor.cli.commands import check_cmd, render_cmd, routes_cmd, show_cmd


app = typer.Typer(name="mdtailor", no_args_is_help=True, help="Validate front matter and render markdown bodies by route")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Validate front matter and render markdown bodies by route."""
    ctx.obj = {"log_level": log_level.upper() if log_level else None}


app.command(name="routes")(routes_cmd)
app.command(name="check")(check_cmd)
app.command(name="render")(render_cmd)
app.command(name="show")(show_cmd)
