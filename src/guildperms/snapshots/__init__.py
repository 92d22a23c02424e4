"""Snapshot stores the permission engine reads from."""

from guildperms.snapshots.files import SnapshotFile, load_snapshot_file
from guildperms.snapshots.memory import InMemorySnapshotStore
from guildperms.snapshots.redis import RedisSnapshotStore
from guildperms.snapshots.store import SnapshotStore


__all__ = [
    "InMemorySnapshotStore",
    "RedisSnapshotStore",
    "SnapshotFile",
    "SnapshotStore",
    "load_snapshot_file",
]
