import typer

from .._version import __version__
from .config import app as config_app
from .convert import convert_command, parse_command, scan_command


__all__ = ["app", "run"]


app = typer.Typer(help="Convert inch dimensions in text to centimetres", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show metricize version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"metricize {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.command("convert", help="Replace inch dimensions with metric markup.")(convert_command)
app.command("parse", help="Parse a single numeric component.")(parse_command)
app.command("scan", help="List dimension matches as JSON Lines.")(scan_command)
app.add_typer(config_app, name="config")


def run() -> None:
    """Entry point compatible with ``python -m metricize.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
