"""
Order Statistics
================

In-place selection of k-th smallest elements under a key.

Lists (and object arrays) use a three-way-partition quickselect with a
median-of-three pivot: expected linear time, and runs of equal keys are
finished in one pass. Native numpy arrays defer to np.argpartition.

After select_inplace(buffer, k) returns, buffer[k] holds the element that
would sit at position k if buffer were sorted by key, every element before
it has a key <= key(buffer[k]) and every element after it has a key >=.
"""

from typing import Any, Callable, Sequence, Union

import numpy as np


def _median_of_three(a, b, c):
    if a < b:
        if b < c:
            return b
        return c if a < c else a
    if a < c:
        return a
    return c if b < c else b


def _select(buffer, k: int, key: Callable, lo: int, hi: int) -> None:
    while hi - lo > 1:
        mid = lo + (hi - lo) // 2
        pivot = _median_of_three(key(buffer[lo]), key(buffer[mid]), key(buffer[hi - 1]))

        # [lo, lt) < pivot, [lt, gt) == pivot, [gt, hi) > pivot
        lt, i, gt = lo, lo, hi
        while i < gt:
            kv = key(buffer[i])
            if kv < pivot:
                buffer[lt], buffer[i] = buffer[i], buffer[lt]
                lt += 1
                i += 1
            elif kv > pivot:
                gt -= 1
                buffer[gt], buffer[i] = buffer[i], buffer[gt]
            else:
                i += 1

        if k < lt:
            hi = lt
        elif k >= gt:
            lo = gt
        else:
            return


def select_inplace(
    buffer: Union[np.ndarray, Sequence[Any]],
    kth: Union[int, Sequence[int]],
    key: Callable = abs,
) -> None:
    """
    Partially order `buffer` in place so the kth-ranked elements are placed.

    Args:
        buffer: Mutable random-access sequence (list or writeable 1D array)
        kth: Rank or ranks (0-based) to place
        key: Ordering key. Native numpy arrays only support abs.

    Raises:
        IndexError: if a rank is outside the buffer
    """
    n = len(buffer)
    ranks = sorted({kth} if isinstance(kth, (int, np.integer)) else set(kth))
    for k in ranks:
        if not 0 <= k < n:
            raise IndexError(f"rank {k} out of range for {n} elements")

    if isinstance(buffer, np.ndarray) and buffer.dtype != object:
        if key is not abs:
            raise TypeError("numpy buffers can only be selected by magnitude")
        # Integer abs wraps at the type minimum; widen before taking magnitudes
        values = buffer.astype(np.float64) if buffer.dtype.kind in "biu" else buffer
        order = np.argpartition(np.abs(values), ranks)
        buffer[:] = buffer[order]
        return

    lo = 0
    for k in ranks:
        _select(buffer, k, key, lo, n)
        lo = k + 1
