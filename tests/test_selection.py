import numba
import numpy as np
import pytest

from algorithms import nth_element, nth_element_range, nth_element_array
from algorithms.selection import partition_pivot
from primitives.access import array_swap
from primitives.sequence import IntSequence, FloatSequence


@numba.njit
def less_at(arr, i, j):
    return arr[i] < arr[j]


@numba.njit
def greater_at(arr, i, j):
    return arr[i] > arr[j]


@numba.njit
def median(values):
    # selection composes with other compiled code
    work = values.copy()
    mid = len(work) // 2
    nth_element_array(work, less_at, mid)
    return work[mid]


def assert_selected(out, k, expected):
    assert out[k] == expected
    assert np.all(out[:k] <= out[k])
    assert np.all(out[k + 1:] >= out[k])


def test_every_rank_of_small_input():
    values = [3, 1, 4, 5, 2]
    for k in range(5):
        seq = IntSequence(np.array(values, dtype=np.int64))
        nth_element(seq, k)
        assert seq.data[k] == k + 1

        arr = np.array(values, dtype=np.int64)
        nth_element_array(arr, less_at, k)
        assert arr[k] == k + 1


@pytest.mark.parametrize("seed", range(6))
def test_every_rank_matches_sorted(seed):
    rng = np.random.default_rng(seed)
    values = rng.integers(0, 15, size=int(rng.integers(1, 40)))
    expected = np.sort(values)
    for k in range(len(values)):
        seq = IntSequence(values.copy())
        nth_element(seq, k)
        assert_selected(np.array(seq.data), k, expected[k])


@pytest.mark.parametrize("seed", range(4))
def test_conventions_agree(seed):
    rng = np.random.default_rng(50 + seed)
    values = rng.random(25)
    for k in (0, 7, 24):
        seq = FloatSequence(values.copy())
        arr = values.copy()
        nth_element(seq, k)
        nth_element_array(arr, less_at, k)
        assert np.array_equal(seq.data, arr)


def test_range_version_only_touches_range():
    seq = IntSequence(np.array([9, 8, 7, 6, 5, 4, 3], dtype=np.int64))
    nth_element_range(seq, 1, 6, 3)
    out = np.array(seq.data)
    assert out[0] == 9 and out[6] == 3
    assert_selected(out[1:6], 2, 6)


def test_custom_order():
    arr = np.array([3, 1, 4, 5, 2], dtype=np.int64)
    nth_element_array(arr, greater_at, 0)
    assert arr[0] == 5


def test_sorted_and_reversed_input():
    n = 200
    for values in (np.arange(n), np.arange(n)[::-1].copy()):
        arr = values.astype(np.int64)
        nth_element_array(arr, less_at, n // 3)
        assert_selected(arr, n // 3, n // 3)


def test_median_from_compiled_code():
    assert median(np.array([5.0, 1.0, 3.0, 2.0, 4.0])) == 3.0


def test_rank_out_of_range_raises():
    seq = IntSequence(np.array([3, 1, 2], dtype=np.int64))
    with pytest.raises(IndexError, match="rank out of range"):
        nth_element(seq, 3)

    arr = np.array([3, 1, 2], dtype=np.int64)
    with pytest.raises(IndexError, match="rank out of range"):
        nth_element_array(arr, less_at, 0, 1, 3)


def test_empty_and_invalid_ranges_are_noops():
    seq = IntSequence(np.empty(0, dtype=np.int64))
    nth_element(seq, 0)

    arr = np.array([3, 1, 2], dtype=np.int64)
    nth_element_array(arr, less_at, 1, 2, 1)
    nth_element_array(arr, less_at, 1, 0, 7)
    assert list(arr) == [3, 1, 2]


def test_single_element_range():
    arr = np.array([3, 1, 2], dtype=np.int64)
    nth_element_array(arr, less_at, 1, 1, 2)
    assert list(arr) == [3, 1, 2]


def test_partition_pivot_places_last_element():
    arr = np.array([5, 8, 1, 9, 2, 6], dtype=np.int64)
    p = partition_pivot(arr, array_swap, less_at, 0, len(arr))
    assert p == 3
    assert arr[p] == 6
    assert list(arr[:p]) == [5, 1, 2]
    assert np.all(arr[p + 1:] >= 6)
