import numba

from primitives.access import seq_test, array_test, valid_range


@numba.njit
def all_of_impl(data, test, pred, begin, end):
    for i in range(begin, end):
        if not test(data, pred, i):
            return False
    return True


@numba.njit
def any_of_impl(data, test, pred, begin, end):
    for i in range(begin, end):
        if test(data, pred, i):
            return True
    return False


@numba.njit
def none_of_impl(data, test, pred, begin, end):
    for i in range(begin, end):
        if test(data, pred, i):
            return False
    return True


@numba.njit
def all_of_range(seq, begin, end, pred):
    return all_of_impl(seq, seq_test, pred, begin, end)


@numba.njit
def all_of(seq, pred):
    return all_of_impl(seq, seq_test, pred, 0, seq.length())


@numba.njit
def all_of_array(arr, pred, begin=0, end=None):
    if end is None:
        end = len(arr)
    if not valid_range(len(arr), begin, end):
        return True
    return all_of_impl(arr, array_test, pred, begin, end)


@numba.njit
def any_of_range(seq, begin, end, pred):
    return any_of_impl(seq, seq_test, pred, begin, end)


@numba.njit
def any_of(seq, pred):
    return any_of_impl(seq, seq_test, pred, 0, seq.length())


@numba.njit
def any_of_array(arr, pred, begin=0, end=None):
    if end is None:
        end = len(arr)
    if not valid_range(len(arr), begin, end):
        return False
    return any_of_impl(arr, array_test, pred, begin, end)


@numba.njit
def none_of_range(seq, begin, end, pred):
    return none_of_impl(seq, seq_test, pred, begin, end)


@numba.njit
def none_of(seq, pred):
    return none_of_impl(seq, seq_test, pred, 0, seq.length())


@numba.njit
def none_of_array(arr, pred, begin=0, end=None):
    if end is None:
        end = len(arr)
    if not valid_range(len(arr), begin, end):
        return True
    return none_of_impl(arr, array_test, pred, begin, end)
