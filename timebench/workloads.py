# timebench/workloads.py
#
# Sample workloads for exercising the harness: an in-place insertion sort and
# generators for its input arrays in four orderings. The arrays are NumPy
# integer arrays; the sort works on any mutable sequence, so callers usually
# hand it a list copy so each repetition starts from the same ordering.

import numpy as np


def insertion_sort(a, lo=0, hi=None):
    """
    Sorts a[lo:hi] in place by insertion.

    Args:
        a: A mutable sequence of comparable items.
        lo: First index of the range to sort.
        hi: One past the last index of the range; defaults to len(a).

    Returns:
        a, for convenience.
    """
    if hi is None:
        hi = len(a)
    for i in range(lo + 1, hi):
        item = a[i]
        j = i
        while j > lo and a[j - 1] > item:
            a[j] = a[j - 1]
            j -= 1
        a[j] = item
    return a


def is_sorted(a) -> bool:
    return all(a[i - 1] <= a[i] for i in range(1, len(a)))


def ordered_array(n, rng=None):
    """0, 1, ..., n-1."""
    return np.arange(n, dtype=np.int64)


def reversed_array(n, rng=None):
    """n-1, n-2, ..., 0."""
    return np.arange(n - 1, -1, -1, dtype=np.int64)


def partially_ordered_array(n, rng=None):
    """
    The first half holds random values in [0, n/2); the second half holds its
    own indices, so it is already in order.
    """
    rng = rng if rng is not None else np.random.default_rng()
    half = n // 2
    head = rng.integers(0, max(half, 1), size=half, dtype=np.int64)
    tail = np.arange(half, n, dtype=np.int64)
    return np.concatenate([head, tail])


def random_array(n, rng=None):
    """n random values in [0, n)."""
    rng = rng if rng is not None else np.random.default_rng()
    return rng.integers(0, max(n, 1), size=n, dtype=np.int64)


ARRAY_KINDS = {
    "ordered": ordered_array,
    "reversed": reversed_array,
    "partially": partially_ordered_array,
    "random": random_array,
}

ARRAY_LABELS = {
    "ordered": "Ordered",
    "reversed": "Reversed",
    "partially": "Partially ordered",
    "random": "Random",
}
