"""Application-wide constants.

This module defines constants used throughout the package
to avoid magic numbers and ensure consistency.
"""

# Permission bitmasks are unsigned 64-bit integers
PERMISSION_BIT_WIDTH = 64
MAX_PERMISSION_BITS = (1 << PERMISSION_BIT_WIDTH) - 1

# Snapshot store keys, formatted as "<prefix><kind>:<id>"
SNAPSHOT_KIND_GUILDS = "guilds"
SNAPSHOT_KIND_MEMBERS = "members"
SNAPSHOT_KIND_CHANNELS = "channels"
DEFAULT_SNAPSHOT_KEY_PREFIX = "cache:"

# Redis connection pool
DEFAULT_REDIS_MAX_CONNECTIONS = 50
