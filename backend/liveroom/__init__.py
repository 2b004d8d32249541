"""Live room signaling service."""

__version__ = "0.1.0"
