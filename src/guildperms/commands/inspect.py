"""Commands: guildperms flags / bits - Convert between bitmasks and names."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from guildperms.core.errors import UnknownPermissionError
from guildperms.permissions.bits import from_flags, to_flags
from guildperms.permissions.flags import KNOWN_BITS


console = Console()


def flags(
    value: str = typer.Argument(..., help="Permission bitmask (decimal or 0x hex)"),
) -> None:
    """Expand a permission bitmask into permission names."""
    try:
        bits = int(value, 0)
    except ValueError:
        console.print(f"[red]Error:[/red] '{escape(value)}' is not an integer bitmask.")
        raise typer.Exit(1) from None

    if bits < 0:
        console.print("[red]Error:[/red] Bitmasks cannot be negative.")
        raise typer.Exit(1)

    table = Table(title=f"Permissions in {bits}", show_header=True)
    table.add_column("Bit", style="green", no_wrap=True)
    table.add_column("Name", style="cyan")
    for permission in to_flags(bits):
        table.add_row(str(permission.value.bit_length() - 1), permission.name)

    console.print(table)

    unknown = bits & ~KNOWN_BITS
    if unknown:
        console.print(f"[yellow]Warning:[/yellow] Uncatalogued bits ignored: {unknown}")


def bits(
    names: list[str] = typer.Argument(..., help="Permission names, e.g. SEND_MESSAGES"),
) -> None:
    """Combine permission names into a bitmask."""
    try:
        value = from_flags(names)
    except UnknownPermissionError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from None

    console.print(str(value))
