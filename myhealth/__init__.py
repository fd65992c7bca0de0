"""MyHealth AI: medical chat backend and client."""

__version__ = "1.0.0"
