#
# Copyright (C) 2026 University of Oxford
#
# This file is part of fenwick.
#
# fenwick is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# fenwick is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with fenwick.  If not, see <http://www.gnu.org/licenses/>.
#
"""
Core functions used throughout fenwick.

The index arithmetic below works on Python ints. Python models integers
as arbitrary precision values, but negation of a positive int behaves as
an infinitely sign-extended two's complement number under ``&``, so
``i & -i`` isolates the lowest set bit exactly as it does for a fixed
width type. Indexes are always bounded by the capacity of the tree so
there is no overflow to worry about here; the *values* stored in the
trees are governed by the numpy dtype of the backing arrays.
"""
from __future__ import annotations

import numbers
from typing import Any

import numpy as np

__version__ = "undefined"
try:
    from . import _version

    __version__ = _version.version
except ImportError:
    pass


DEFAULT_DTYPE = np.int64


def lowbit(index: int) -> int:
    """
    Returns the value of the lowest set bit of the specified index.
    """
    return index & -index


def next_index(index: int) -> int:
    """
    Returns the next tree node whose range covers the specified node.
    """
    return index + (index & -index)


def prev_index(index: int) -> int:
    """
    Returns the tree node covering the range immediately before the
    range of the specified node.
    """
    return index - (index & -index)


def highest_power_of_two(n: int) -> int:
    """
    Returns the largest power of two less than or equal to n, or 0 if
    n is zero.
    """
    u = n
    result = 0
    while u != 0:
        result = u
        u -= u & -u
    return result


def difference(a, b, dtype):
    """
    Returns ``a - b`` computed in the specified dtype, wrapping around on
    overflow for fixed width integer types. Object arrays hold Python ints,
    so the difference is exact.
    """
    if np.dtype(dtype) == np.dtype(object):
        return a - b
    with np.errstate(over="ignore"):
        return np.subtract(a, b, dtype=dtype)


def isinteger(value: Any) -> bool:
    """
    Returns True if the specified value can be converted losslessly to an
    integer.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Number):
        # Mypy doesn't realise we've done an isinstance here.
        try:
            return int(value) == float(value)  # type: ignore
        except (OverflowError, ValueError):
            # inf and nan
            return False
    return False


def check_index(value: Any, name: str = "index") -> int:
    """
    Checks that the specified value is an integer and returns it as a
    Python int.
    """
    if not isinteger(value):
        raise TypeError(f"{name} must be an integer, not {value!r}")
    return int(value)


def as_integer_array(values, *, dtype=DEFAULT_DTYPE) -> np.ndarray:
    """
    Returns the specified values as a numpy array of the specified dtype,
    checking that every value is an integer. Floating point values are
    accepted only when they are integral.
    """
    array = np.asarray(values)
    if array.dtype.kind in "iu":
        return array.astype(dtype)
    if array.size > 0:
        bad = [j for j, x in enumerate(array.flat) if not isinteger(x)]
        if len(bad) > 0:
            raise TypeError(f"Values must be integers; bad values at indexes {bad}")
    if np.dtype(dtype) == np.dtype(object):
        result = np.empty(array.shape, dtype=object)
        result.flat[:] = [int(x) for x in array.flat]
        return result
    return array.astype(dtype)
