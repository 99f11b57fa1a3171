"""Configuration loaders, session tokens and helpers for a strategy game server."""

__version__ = "0.1.0"