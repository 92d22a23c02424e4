"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from guildperms.permissions.flags import Permission
from guildperms.permissions.models import Channel, Guild, Member, Overwrite, Role
from guildperms.permissions.resolver import PermissionResolver
from guildperms.snapshots.memory import InMemorySnapshotStore
from tests.factories import (
    ChannelFactory,
    RoleFactory,
    build_guild,
    build_member,
)


@dataclass
class Scenario:
    """A guild where the everyone role may view, R1 may send, and
    channel C denies sending to everyone but allows it for R1."""

    guild: Guild
    role: Role
    member: Member
    channel: Channel
    store: InMemorySnapshotStore


@pytest.fixture
def scenario() -> Scenario:
    """Build the view/send guild scenario."""
    role = RoleFactory.build(permissions=int(Permission.SEND_MESSAGES), position=1)
    guild = build_guild(everyone_permissions=int(Permission.VIEW_CHANNEL), roles=[role])
    member = build_member(guild, [role.id])
    channel = ChannelFactory.build(
        guild_id=guild.id,
        permission_overwrites=[
            Overwrite(id=guild.id, deny=int(Permission.SEND_MESSAGES)),
            Overwrite(id=role.id, allow=int(Permission.SEND_MESSAGES)),
        ],
    )
    store = InMemorySnapshotStore(guilds=[guild], members=[member], channels=[channel])
    return Scenario(guild=guild, role=role, member=member, channel=channel, store=store)


@pytest.fixture
def resolver(scenario: Scenario) -> PermissionResolver:
    """Resolver over the scenario's store."""
    return PermissionResolver(scenario.store)


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    """Write a YAML snapshot file.

    Guild 1 is owned by member 10. Member 20 holds role 2 (MANAGE_MESSAGES,
    position 5). Member 30 holds role 3 (ADMINISTRATOR, position 1).
    Channel 100 denies SEND_MESSAGES to everyone; channel 200 is private.
    """
    path = tmp_path / "snapshot.yaml"
    path.write_text(
        """
guilds:
  - id: 1
    owner_id: 10
    name: Test Guild
    roles:
      "1": {id: 1, name: "@everyone", permissions: "3072", position: 0}
      "2": {id: 2, name: moderator, permissions: 8192, position: 5}
      "3": {id: 3, name: admin, permissions: 8, position: 1}
members:
  - id: 10
  - id: 20
    guilds:
      "1": {roles: ["2"]}
  - id: 30
    guilds:
      "1": {roles: [3]}
channels:
  - id: 100
    guild_id: 1
    name: general
    permission_overwrites:
      - {id: 1, allow: 0, deny: 2048}
  - id: 200
"""
    )
    return path
