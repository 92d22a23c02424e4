"""Load snapshots from YAML or JSON files.

A snapshot file holds three top-level lists::

    guilds:
      - id: 1
        owner_id: 10
        roles:
          1: {id: 1, permissions: 1024}
    members:
      - id: 20
        guilds:
          1: {roles: [2]}
    channels:
      - id: 100
        guild_id: 1
        permission_overwrites:
          - {id: 1, deny: 2048}

JSON is a subset of YAML, so both formats go through the same loader.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from guildperms.permissions.models import Channel, Guild, Member
from guildperms.snapshots.memory import InMemorySnapshotStore


class SnapshotFile(BaseModel):
    """Contents of a snapshot file."""

    guilds: list[Guild] = Field(default_factory=list)
    members: list[Member] = Field(default_factory=list)
    channels: list[Channel] = Field(default_factory=list)


def load_snapshot_file(path: Path) -> InMemorySnapshotStore:
    """Parse a snapshot file into an in-memory store.

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is not valid YAML/JSON
        pydantic.ValidationError: If entities do not match the models
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    snapshot = SnapshotFile.model_validate(raw)
    return InMemorySnapshotStore(
        guilds=snapshot.guilds,
        members=snapshot.members,
        channels=snapshot.channels,
    )
