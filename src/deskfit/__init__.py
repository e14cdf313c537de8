"""deskfit - deterministic engagement scoring and daily insights for desk workers."""

__version__ = "0.1.0"
