"""Test factories."""

from tests.factories.snapshots import (
    ChannelFactory,
    GuildFactory,
    MemberFactory,
    OverwriteFactory,
    RoleFactory,
    build_guild,
    build_member,
    next_snowflake,
)


__all__ = [
    "ChannelFactory",
    "GuildFactory",
    "MemberFactory",
    "OverwriteFactory",
    "RoleFactory",
    "build_guild",
    "build_member",
    "next_snowflake",
]
