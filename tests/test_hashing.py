"""Tests for bucket_index."""

import pytest
from pychained import InvalidKey, bucket_index


class NegativeHash:
    def __hash__(self):
        return -13


class TestBucketIndex:
    """Test bucket placement."""

    @pytest.mark.parametrize("capacity", [1, 2, 7, 16, 1009])
    def test_in_range(self, capacity):
        for key in ['a', 'bb', 0, -1, 10**20, (1, 2), 3.5]:
            assert 0 <= bucket_index(key, capacity) < capacity

    def test_deterministic(self):
        assert bucket_index('same', 31) == bucket_index('same', 31)

    def test_int_keys(self):
        assert bucket_index(5, 4) == 1
        assert bucket_index(-1, 4) == 3

    def test_negative_hash(self):
        assert bucket_index(NegativeHash(), 5) == 2

    def test_equal_keys_same_bucket(self):
        assert bucket_index(1, 8) == bucket_index(1.0, 8) == bucket_index(True, 8)

    def test_none_key(self):
        with pytest.raises(InvalidKey):
            bucket_index(None, 4)

    def test_unhashable_key(self):
        with pytest.raises(TypeError):
            bucket_index([1, 2], 4)
