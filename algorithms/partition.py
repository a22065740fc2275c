'''
Stable partition without a scratch buffer.

Both halves of a range are partitioned on their own, then the failing tail of
the left half and the matching head of the right half trade places with one
rotation. Recursion depth is log2(n), the number of swaps O(n log n).
'''
import numba

from algorithms.rotation import rotate_impl
from primitives.access import seq_swap, seq_test, array_swap, array_test, valid_range


@numba.njit
def stable_partition_impl(data, swap, test, pred, begin, end):
    n = end - begin
    if n <= 0:
        return begin
    if n == 1:
        if test(data, pred, begin):
            return begin + 1
        return begin

    middle = (begin + end) // 2
    left = stable_partition_impl(data, swap, test, pred, begin, middle)
    right = stable_partition_impl(data, swap, test, pred, middle, end)
    # [left, middle) fails pred, [middle, right) satisfies it
    return rotate_impl(data, swap, left, middle, right)


@numba.njit
def stable_partition_range(seq, begin, end, pred):
    return stable_partition_impl(seq, seq_swap, seq_test, pred, begin, end)


@numba.njit
def stable_partition(seq, pred):
    return stable_partition_impl(seq, seq_swap, seq_test, pred, 0, seq.length())


@numba.njit
def stable_partition_array(arr, pred, begin=0, end=None):
    if end is None:
        end = len(arr)
    if not valid_range(len(arr), begin, end):
        return begin
    return stable_partition_impl(arr, array_swap, array_test, pred, begin, end)
