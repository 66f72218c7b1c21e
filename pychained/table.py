"""
Separate-chaining hash table that maps each key to a FIFO of values.

Inserting a key that is already present appends to its value queue instead of
overwriting, so a key accumulates every value it was inserted with, in arrival
order. Capacity is fixed until resize() is called explicitly; there is no
automatic growth.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidCapacity
from .hashing import bucket_index
from .value_queue import ValueQueue

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16


class _BucketNode:
    """One key in a bucket chain. Owns the key's value queue and the next node."""

    __slots__ = ('key', 'values', 'next')

    def __init__(self, key: Any):
        self.key = key
        self.values = ValueQueue()
        self.next: Optional['_BucketNode'] = None


def _check_capacity(capacity: Any) -> None:
    # bool is an int subclass; True is not a capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        logger.debug("Rejected capacity %r", capacity)
        raise InvalidCapacity(f"capacity must be a positive int, got {capacity!r}")


def _chain_node(buckets: List[Optional[_BucketNode]], key: Any) -> Tuple[_BucketNode, bool]:
    """
    Find the node for key in buckets, appending a new one at the chain tail
    if key is absent.

    Returns (node, created). A created node has an empty value queue; the
    caller fills it before returning control to user code.
    """
    index = bucket_index(key, len(buckets))
    node = buckets[index]
    if node is None:
        node = buckets[index] = _BucketNode(key)
        return node, True

    while True:
        if node.key == key:
            return node, False
        if node.next is None:
            node.next = _BucketNode(key)
            return node.next, True
        node = node.next


class ChainedHashTable:
    """
    A mutable hash table with separate chaining and multi-valued keys.

    Example:
        t = ChainedHashTable(4)
        t.insert('a', 1)
        t.insert('b', 2)
        t.insert('a', 3)

        t.search('a')      # ValueQueue([1, 3])
        t.key_count()      # 2
        t.resize(8)
        t.load_factor()    # 0.25

    Not thread-safe; callers sharing a table across threads must serialize
    access themselves.
    """

    __slots__ = ('_buckets', '_count')

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        _check_capacity(capacity)
        self._buckets: List[Optional[_BucketNode]] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def insert(self, key: Any, value: Any) -> bool:
        """
        Add value to the queue stored under key, creating the entry if needed.

        Always returns True; only a None key is rejected (InvalidKey).
        """
        node, created = _chain_node(self._buckets, key)
        node.values.append(value)
        if created:
            self._count += 1
        return True

    def search(self, key: Any) -> Optional[ValueQueue]:
        """Return the live value queue for key, or None if key is absent."""
        node = self._buckets[bucket_index(key, len(self._buckets))]
        while node is not None:
            if node.key == key:
                return node.values
            node = node.next
        return None

    def remove(self, key: Any) -> Optional[ValueQueue]:
        """
        Remove key and return its value queue, or None if key is absent.

        Other keys sharing the bucket stay in the chain in their original order.
        """
        index = bucket_index(key, len(self._buckets))
        prev = None
        node = self._buckets[index]
        while node is not None:
            if node.key == key:
                if prev is None:
                    self._buckets[index] = node.next
                else:
                    prev.next = node.next
                node.next = None
                self._count -= 1
                return node.values
            prev = node
            node = node.next
        return None

    def resize(self, new_capacity: int) -> None:
        """
        Grow the table to new_capacity buckets and redistribute every entry.

        new_capacity must be strictly greater than the current capacity.
        Each key keeps its values in the same order, including a key whose
        queue was emptied by the caller. Queues are copied into new nodes, so
        the queues handed out before the resize are left as they were but no
        longer belong to the table; search again to get the current ones.
        If a key's __hash__ or __eq__ raises part way through, the table is
        left unchanged.
        """
        _check_capacity(new_capacity)
        old_buckets = self._buckets
        if new_capacity <= len(old_buckets):
            logger.debug("Rejected resize from %d to %d", len(old_buckets), new_capacity)
            raise InvalidCapacity(
                f"new capacity must exceed current capacity {len(old_buckets)}, "
                f"got {new_capacity}"
            )

        new_buckets: List[Optional[_BucketNode]] = [None] * new_capacity
        new_count = 0
        for head in old_buckets:
            node = head
            while node is not None:
                new_node, created = _chain_node(new_buckets, node.key)
                for value in node.values:
                    new_node.values.append(value)
                if created:
                    new_count += 1
                node = node.next

        self._buckets = new_buckets
        self._count = new_count
        logger.debug(
            "Resized table from %d to %d buckets (%d keys, load factor %.3f)",
            len(old_buckets), new_capacity, new_count, self.load_factor(),
        )

    def all_keys(self) -> List[Any]:
        """All keys, in bucket order then chain order."""
        return list(self)

    def key_count(self) -> int:
        """Number of distinct keys stored."""
        return self._count

    def load_factor(self) -> float:
        """key_count / capacity."""
        return self._count / len(self._buckets)

    def bucket_sizes(self) -> List[int]:
        """Chain length of every bucket, indexed by bucket."""
        sizes = []
        for head in self._buckets:
            size = 0
            node = head
            while node is not None:
                size += 1
                node = node.next
            sizes.append(size)
        return sizes

    def _nodes(self) -> Iterator[_BucketNode]:
        for head in self._buckets:
            node = head
            while node is not None:
                yield node
                node = node.next

    def items(self) -> Iterator[Tuple[Any, ValueQueue]]:
        """Iterate over (key, value queue) pairs."""
        for node in self._nodes():
            yield (node.key, node.values)

    def keys(self) -> Iterator[Any]:
        return iter(self)

    def values(self) -> Iterator[ValueQueue]:
        for node in self._nodes():
            yield node.values

    def get(self, key: Any, default=None) -> Any:
        """Return the value queue for key, or default if absent."""
        values = self.search(key)
        return default if values is None else values

    def __getitem__(self, key: Any) -> ValueQueue:
        """Get the value queue using bracket notation. Raises KeyError if absent."""
        values = self.search(key)
        if values is None:
            raise KeyError(key)
        return values

    def __contains__(self, key: Any) -> bool:
        if key is None:
            return False
        return self.search(key) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.key

    def __repr__(self) -> str:
        """Bucket layout: None for an empty bucket, the chain's keys otherwise."""
        buckets = []
        for head in self._buckets:
            if head is None:
                buckets.append('None')
                continue
            keys = []
            node = head
            while node is not None:
                keys.append(repr(node.key))
                node = node.next
            buckets.append('[' + ', '.join(keys) + ']')
        return 'ChainedHashTable({' + ', '.join(buckets) + '})'

    @staticmethod
    def from_pairs(pairs: Iterable[Tuple[Any, Any]],
                   capacity: int = DEFAULT_CAPACITY) -> 'ChainedHashTable':
        """Create a table by inserting each (key, value) pair in order."""
        table = ChainedHashTable(capacity)
        for key, value in pairs:
            table.insert(key, value)
        return table
