'''
Quickselect (nth_element).

The pivot is always the last element of the active range. That keeps the
selection deterministic and identical for both calling conventions, but sorted
or reverse-sorted input costs O(n^2) comparisons. The range shrinks in a loop
rather than through recursion, so the worst case costs time but no stack.
'''
import numba

from primitives.access import seq_swap, seq_less, array_swap, valid_range
from utils.constants import RANK_OUT_OF_RANGE


@numba.njit
def partition_pivot(data, swap, less, begin, end):
    pivot = end - 1

    # store: first element not known to be less than the pivot
    store = begin
    for i in range(begin, pivot):
        if less(data, i, pivot):
            if i != store:
                swap(data, store, i)
            store += 1

    if store != pivot:
        swap(data, store, pivot)
    return store


@numba.njit
def nth_element_impl(data, swap, less, k, begin, end):
    if end <= begin:
        return
    if k < begin or k >= end:
        raise IndexError(RANK_OUT_OF_RANGE)

    while end - begin > 1:
        p = partition_pivot(data, swap, less, begin, end)
        if p == k:
            return
        elif k < p:
            end = p
        else:
            begin = p + 1


@numba.njit
def nth_element_range(seq, begin, end, k):
    nth_element_impl(seq, seq_swap, seq_less, k, begin, end)


@numba.njit
def nth_element(seq, k):
    nth_element_impl(seq, seq_swap, seq_less, k, 0, seq.length())


@numba.njit
def nth_element_array(arr, less, k, begin=0, end=None):
    if end is None:
        end = len(arr)
    if valid_range(len(arr), begin, end):
        nth_element_impl(arr, array_swap, less, k, begin, end)
