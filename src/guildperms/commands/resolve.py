"""Commands: guildperms guild / channel / outranks - Resolve against a snapshot file."""

import asyncio
from collections.abc import Coroutine
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from guildperms.core.errors import PermissionsError
from guildperms.permissions.bits import is_administrator, missing, to_flags
from guildperms.permissions.flags import CapabilitySet
from guildperms.permissions.resolver import PermissionResolver
from guildperms.snapshots.files import load_snapshot_file


console = Console()

R = TypeVar("R")

SnapshotArg = Annotated[
    Path, typer.Argument(help="Snapshot file (YAML or JSON)", exists=True, dir_okay=False)
]
RequireOpt = Annotated[
    list[str] | None,
    typer.Option("--require", "-r", help="Permission the member must hold (repeatable)"),
]


def _resolver(snapshot: Path) -> PermissionResolver:
    try:
        return PermissionResolver(load_snapshot_file(snapshot))
    except (yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Error:[/red] Invalid snapshot file: {escape(str(e))}")
        raise typer.Exit(1) from None


def _report(bits: CapabilitySet, require: list[str] | None) -> None:
    """Print resolved permissions and fail if a required one is missing."""
    if is_administrator(bits):
        console.print("[bold green]ADMINISTRATOR[/bold green] (all permissions)")
    else:
        console.print(f"[bold]Permissions:[/bold] {bits}")
        for permission in to_flags(bits):
            console.print(f"  - {permission.name}")

    if not require:
        return

    try:
        absent = missing(bits, require)
    except PermissionsError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from None

    if absent:
        console.print(f"[red]Missing permission:[/red] {absent[0].name}")
        raise typer.Exit(1)
    console.print("[green]✓[/green] All required permissions present")


def _run(coro: Coroutine[Any, Any, R]) -> R:
    try:
        return asyncio.run(coro)
    except PermissionsError as e:
        console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from None


def guild(
    snapshot: SnapshotArg,
    member: int = typer.Option(..., "--member", "-m", help="Member id"),
    guild_id: int = typer.Option(..., "--guild", "-g", help="Guild id"),
    require: RequireOpt = None,
) -> None:
    """Show a member's guild-wide permissions."""
    resolver = _resolver(snapshot)
    bits = _run(resolver.guild_permissions(member, guild_id))
    _report(bits, require)


def channel(
    snapshot: SnapshotArg,
    member: int = typer.Option(..., "--member", "-m", help="Member id"),
    channel_id: int = typer.Option(..., "--channel", "-c", help="Channel id"),
    require: RequireOpt = None,
) -> None:
    """Show a member's permissions in a channel, after overwrites."""
    resolver = _resolver(snapshot)
    bits = _run(resolver.channel_permissions(member, channel_id))
    _report(bits, require)


def outranks(
    snapshot: SnapshotArg,
    guild_id: int = typer.Option(..., "--guild", "-g", help="Guild id"),
    member: int = typer.Option(..., "--member", "-m", help="Member id"),
    role: int = typer.Option(..., "--role", help="Role id to compare against"),
) -> None:
    """Check whether a member's highest role outranks a role."""
    resolver = _resolver(snapshot)
    if _run(resolver.member_outranks(guild_id, member, role)):
        console.print(f"[green]✓[/green] Member {member} outranks role {role}")
    else:
        console.print(f"[yellow]✗[/yellow] Member {member} does not outrank role {role}")
        raise typer.Exit(1)
