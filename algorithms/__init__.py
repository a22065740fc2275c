'''
In-place sequence algorithms.

Each algorithm comes in three shapes:
    name(seq, ...)              whole capability sequence
    name_range(seq, begin, end, ...)
    name_array(arr, ..., begin=0, end=None)
Capability sequences are jitclasses with get/length/swap/less methods
(see primitives.sequence). Array predicates and comparators are index based:
pred(arr, i), less(arr, i, j). All predicates must be numba.njit functions.
'''
from algorithms.reversal import reverse, reverse_range, reverse_array
from algorithms.rotation import rotate, rotate_range, rotate_array
from algorithms.partition import stable_partition, stable_partition_range, stable_partition_array
from algorithms.quantifiers import (all_of, all_of_range, all_of_array,
                                    any_of, any_of_range, any_of_array,
                                    none_of, none_of_range, none_of_array)
from algorithms.selection import nth_element, nth_element_range, nth_element_array

__all__ = [
    'reverse', 'reverse_range', 'reverse_array',
    'rotate', 'rotate_range', 'rotate_array',
    'stable_partition', 'stable_partition_range', 'stable_partition_array',
    'all_of', 'all_of_range', 'all_of_array',
    'any_of', 'any_of_range', 'any_of_array',
    'none_of', 'none_of_range', 'none_of_array',
    'nth_element', 'nth_element_range', 'nth_element_array',
]
