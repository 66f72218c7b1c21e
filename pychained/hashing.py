"""Bucket placement for chained hash tables."""

from typing import Any

from .errors import InvalidKey


def bucket_index(key: Any, capacity: int) -> int:
    """Map key to a bucket index in [0, capacity)."""
    if key is None:
        raise InvalidKey("key must be non-None")
    index = hash(key) % capacity
    if index < 0:
        index += capacity
    return index
