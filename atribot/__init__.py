"""Group-chat bot plugins for replies, small games, web lookups and text tools."""

__version__ = "1.5.0"