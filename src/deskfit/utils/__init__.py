"""Utility functions for deskfit."""

from .hashing import seed_from_parts, stable_hash

__all__ = ["seed_from_parts", "stable_hash"]
