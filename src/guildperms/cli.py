"""Main guildperms CLI application."""

import typer
from rich.console import Console

from guildperms import __version__
from guildperms.commands import inspect, resolve
from guildperms.config import settings
from guildperms.core.logging import configure_logging


console = Console()

app = typer.Typer(
    name="guildperms",
    help="Inspect permission bitmasks and resolve member permissions from snapshots.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="flags")(inspect.flags)
app.command(name="bits")(inspect.bits)
app.command(name="guild")(resolve.guild)
app.command(name="channel")(resolve.channel)
app.command(name="outranks")(resolve.outranks)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """guildperms CLI - Audit guild and channel permissions."""
    if version:
        console.print(f"[bold cyan]guildperms[/bold cyan] version {__version__}")
        raise typer.Exit()


def main() -> None:
    """Entry point for the CLI."""
    configure_logging(settings)
    app()


if __name__ == "__main__":
    main()
