import logging

import numba
import numpy as np

from primitives.access import check_index

logger = logging.getLogger(__name__)


@numba.experimental.jitclass([
    ('data', numba.int64[:])
])
class IntSequence:
    def __init__(self, data):
        self.data = data

    def length(self):
        return len(self.data)

    def get(self, i):
        check_index(len(self.data), i)
        return self.data[i]

    def swap(self, i, j):
        n = len(self.data)
        check_index(n, i)
        check_index(n, j)
        self.data[i], self.data[j] = self.data[j], self.data[i]

    def less(self, i, j):
        n = len(self.data)
        check_index(n, i)
        check_index(n, j)
        return self.data[i] < self.data[j]


@numba.experimental.jitclass([
    ('data', numba.float64[:])
])
class FloatSequence:
    def __init__(self, data):
        self.data = data

    def length(self):
        return len(self.data)

    def get(self, i):
        check_index(len(self.data), i)
        return self.data[i]

    def swap(self, i, j):
        n = len(self.data)
        check_index(n, i)
        check_index(n, j)
        self.data[i], self.data[j] = self.data[j], self.data[i]

    def less(self, i, j):
        n = len(self.data)
        check_index(n, i)
        check_index(n, j)
        return self.data[i] < self.data[j]


def as_sequence(values):
    """
    Wrap a 1-d array-like into the capability sequence matching its dtype.

    The sequence keeps a reference to the buffer when it already is a contiguous
    int64/float64 array, so in-place algorithms then mutate the caller's array.
    Otherwise the values are copied and the result lives in ``seq.data``.
    """
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise TypeError("expected a 1-d sequence, got %d dimensions" % arr.ndim)

    if arr.dtype.kind in ('i', 'u'):
        data = np.ascontiguousarray(arr, dtype=np.int64)
        seq, name = IntSequence(data), 'IntSequence'
    elif arr.dtype.kind == 'f':
        data = np.ascontiguousarray(arr, dtype=np.float64)
        seq, name = FloatSequence(data), 'FloatSequence'
    else:
        raise TypeError("unsupported element dtype: %s" % arr.dtype)

    if data is values:
        logger.debug("wrapped %d values in place as %s", len(data), name)
    else:
        logger.debug("copied %d values of dtype %s into %s", len(data), arr.dtype, name)
    return seq
