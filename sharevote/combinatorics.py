"""Lazy k-subset enumeration over an ordered pool of shares."""
from math import comb


def combinations(items, k: int):
    """
    Yield every size-k subset of items as a tuple, in lexicographic order of
    index positions. Items keep their relative order inside each subset.

    Only the current index vector is held between steps, so memory stays
    O(k) however large C(n, k) is. Each call returns a fresh generator.
    k <= 0 or k > len(items) yields nothing.
    """
    pool = tuple(items)
    n = len(pool)
    if k <= 0 or k > n:
        return

    indices = list(range(k))
    yield tuple(pool[i] for i in indices)

    while True:
        # rightmost position that can still move forward
        for i in reversed(range(k)):
            if indices[i] != i + n - k:
                break
        else:
            return
        indices[i] += 1
        for j in range(i + 1, k):
            indices[j] = indices[j - 1] + 1
        yield tuple(pool[i] for i in indices)


def count_combinations(n: int, k: int) -> int:
    """C(n, k), or 0 where combinations() would yield nothing."""
    if k <= 0 or k > n:
        return 0
    return comb(n, k)
