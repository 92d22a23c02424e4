"""Permission resolution for guild-based chat platforms."""

__version__ = "0.1.0"
