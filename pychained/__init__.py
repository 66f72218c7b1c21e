"""
pychained - separate-chaining hash table with multi-valued keys.

Example:
    from pychained import ChainedHashTable

    t = ChainedHashTable(8)
    t.insert('fruit', 'apple')
    t.insert('fruit', 'pear')
    list(t.search('fruit'))  # ['apple', 'pear']
"""

import logging

from .errors import ChainedTableError, InvalidCapacity, InvalidKey
from .hashing import bucket_index
from .table import DEFAULT_CAPACITY, ChainedHashTable
from .value_queue import ValueQueue

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "ChainedHashTable",
    "ValueQueue",
    "bucket_index",
    "ChainedTableError",
    "InvalidCapacity",
    "InvalidKey",
    "DEFAULT_CAPACITY",
]
