"""Snapshot models consumed by the permission engine.

These are read-only views of cached platform objects. Identifiers are
platform snowflakes; string ids are coerced to integers so that ordering
between identities is numeric.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from guildperms.core.constants import MAX_PERMISSION_BITS


Snowflake = Annotated[int, Field(ge=0)]
PermissionBits = Annotated[int, Field(ge=0, le=MAX_PERMISSION_BITS)]


class SnapshotModel(BaseModel):
    """Base class for immutable snapshot views."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Role(SnapshotModel):
    """A ranked bundle of permission grants.

    The role whose id equals its guild's id is the everyone role.
    """

    id: Snowflake
    name: str = ""
    permissions: PermissionBits = 0
    position: int = 0


class MemberGuild(SnapshotModel):
    """Per-guild membership data. ``roles`` never lists the everyone role."""

    roles: list[Snowflake] = Field(default_factory=list)
    nick: str | None = None


class Member(SnapshotModel):
    """A user, scoped to the guilds it is recorded in."""

    id: Snowflake
    guilds: dict[Snowflake, MemberGuild] = Field(default_factory=dict)

    def role_ids(self, guild_id: int) -> list[int]:
        """Return the explicit role ids this member holds in a guild."""
        membership = self.guilds.get(guild_id)
        if membership is None:
            return []
        return list(membership.roles)


class Guild(SnapshotModel):
    """A community owning roles and channels."""

    id: Snowflake
    owner_id: Snowflake
    name: str = ""
    roles: dict[Snowflake, Role] = Field(default_factory=dict)

    @property
    def everyone_role(self) -> Role | None:
        """The implicit role every member holds."""
        return self.roles.get(self.id)


class Overwrite(SnapshotModel):
    """Channel-scoped allow/deny delta for a role or a member."""

    id: Snowflake
    allow: PermissionBits = 0
    deny: PermissionBits = 0


class Channel(SnapshotModel):
    """A guild channel, or a private channel when ``guild_id`` is None."""

    id: Snowflake
    guild_id: Snowflake | None = None
    name: str = ""
    permission_overwrites: list[Overwrite] = Field(default_factory=list)

    def overwrite_for(self, target_id: int) -> Overwrite | None:
        """Return the first overwrite targeting ``target_id``."""
        for overwrite in self.permission_overwrites:
            if overwrite.id == target_id:
                return overwrite
        return None
