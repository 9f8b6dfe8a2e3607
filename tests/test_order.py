"""
Tests for in-place order statistic selection.
"""

import numpy as np
import pytest

from sigstats.core._order import select_inplace


class TestSelectInPlace:
    """Quickselect by magnitude."""

    def test_single_rank(self):
        """kth element lands in place, partitioned around it."""
        buf = [5, -1, 3, -4, 2]
        select_inplace(buf, 2)
        assert abs(buf[2]) == 3
        assert all(abs(x) <= 3 for x in buf[:2])
        assert all(abs(x) >= 3 for x in buf[3:])

    def test_multiple_ranks(self):
        """Several ranks placed in one call."""
        buf = [9.0, -8.0, 7.0, -6.0, 5.0, -4.0]
        select_inplace(buf, [0, 5, 2])
        assert abs(buf[0]) == 4
        assert abs(buf[2]) == 6
        assert abs(buf[5]) == 9

    def test_matches_sort(self):
        """Every rank agrees with a full sort."""
        rng = np.random.default_rng(1)
        for n in (1, 2, 3, 10, 101):
            values = list(rng.normal(size=n))
            expected = sorted(abs(v) for v in values)
            for k in range(n):
                buf = list(values)
                select_inplace(buf, k)
                assert abs(buf[k]) == expected[k]

    def test_repeated_keys(self):
        """Runs of equal magnitudes terminate."""
        buf = [2, -2, 2, -2, 2, -2, 2]
        select_inplace(buf, 3)
        assert abs(buf[3]) == 2

    def test_custom_key(self):
        """Lists accept any key."""
        buf = [1, 5, 3, 4, 2]
        select_inplace(buf, 0, key=lambda x: -x)
        assert buf[0] == 5

    def test_numpy_buffer(self):
        """Native arrays are partitioned in place."""
        rng = np.random.default_rng(2)
        buf = rng.normal(size=20)
        expected = np.sort(np.abs(buf))[7]
        select_inplace(buf, 7)
        assert abs(buf[7]) == expected

    def test_numpy_custom_key_rejected(self):
        """Native arrays only order by magnitude."""
        with pytest.raises(TypeError):
            select_inplace(np.arange(5.0), 1, key=lambda x: -x)

    def test_rank_out_of_range(self):
        """Ranks outside the buffer raise IndexError."""
        with pytest.raises(IndexError):
            select_inplace([1, 2, 3], 3)
        with pytest.raises(IndexError):
            select_inplace([1, 2, 3], -1)
