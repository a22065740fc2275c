'''
Index level glue shared by both calling conventions.

Every algorithm core only touches the data through a swap function, a test
function (predicate at an index) or a less function (order of two indices).
Capability sequences and native arrays each get their own small adapters here.
'''
import numba

from utils.constants import INDEX_OUT_OF_RANGE


@numba.njit
def check_index(n, i):
    if i < 0 or i >= n:
        raise IndexError(INDEX_OUT_OF_RANGE)


@numba.njit
def valid_range(n, begin, end):
    return 0 <= begin and begin <= end and end <= n


# capability sequences: get / swap / less methods

@numba.njit
def seq_swap(seq, i, j):
    seq.swap(i, j)


@numba.njit
def seq_test(seq, pred, i):
    return pred(seq.get(i))


@numba.njit
def seq_less(seq, i, j):
    return seq.less(i, j)


# native arrays (numpy arrays, typed lists): predicates receive the array and an index

@numba.njit
def array_swap(arr, i, j):
    arr[i], arr[j] = arr[j], arr[i]


@numba.njit
def array_test(arr, pred, i):
    return pred(arr, i)
