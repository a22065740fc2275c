import numba

from algorithms.reversal import reverse_impl
from primitives.access import seq_swap, array_swap, valid_range


@numba.njit
def rotate_impl(data, swap, begin, middle, end):
    if begin > middle or middle > end:
        return begin

    reverse_impl(data, swap, begin, middle)
    reverse_impl(data, swap, middle, end)
    reverse_impl(data, swap, begin, end)

    # new position of the value previously at begin
    return end - middle + begin


@numba.njit
def rotate_range(seq, begin, middle, end):
    return rotate_impl(seq, seq_swap, begin, middle, end)


@numba.njit
def rotate(seq, middle):
    return rotate_impl(seq, seq_swap, 0, middle, seq.length())


@numba.njit
def rotate_array(arr, middle, begin=0, end=None):
    if end is None:
        end = len(arr)
    if not valid_range(len(arr), begin, end):
        return begin
    return rotate_impl(arr, array_swap, begin, middle, end)
