"""endzeit — wait for a moment in time, then run a command."""

__version__ = "0.1.0"
