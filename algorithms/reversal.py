import numba

from primitives.access import seq_swap, array_swap, valid_range


@numba.njit
def reverse_impl(data, swap, begin, end):
    # offset i from begin pairs with offset i from end, the middle element stays
    for i in range((end - begin) // 2):
        swap(data, begin + i, end - 1 - i)


@numba.njit
def reverse_range(seq, begin, end):
    reverse_impl(seq, seq_swap, begin, end)


@numba.njit
def reverse(seq):
    reverse_impl(seq, seq_swap, 0, seq.length())


@numba.njit
def reverse_array(arr, begin=0, end=None):
    # if end is None, consider the whole array
    if end is None:
        end = len(arr)
    if valid_range(len(arr), begin, end):
        reverse_impl(arr, array_swap, begin, end)
