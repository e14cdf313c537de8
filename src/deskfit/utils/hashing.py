"""Stable hashing used to seed template rotation."""

import hashlib


def stable_hash(text: str) -> int:
    """Hash a string to a non-negative int that is identical across runs.

    Unlike the builtin ``hash``, the result does not depend on PYTHONHASHSEED.
    """
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def seed_from_parts(*parts: str) -> int:
    """Combine several string parts into one stable hash."""
    return stable_hash("|".join(parts))
