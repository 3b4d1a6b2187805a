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
One dimensional Fenwick tree (binary indexed tree) over integers.
"""
from __future__ import annotations

import logging

import numpy as np

from fenwick import core
from fenwick import exceptions

logger: logging.Logger = logging.getLogger(__name__)


class FenwickTree:
    """
    A Fenwick tree maintaining prefix sums over a conceptual array of
    ``capacity`` integers, all initially zero. Point updates and range
    sums take O(log n) time; bulk loading with :meth:`build` takes
    O(n log n) since it is done one point update per value.

    The tree is stored in a flat array of ``capacity + 1`` entries. Entry 0
    is unused, and entry ``i`` holds the sum of the conceptual elements in
    the (1-indexed) range ``(i - lowbit(i), i]``. For a capacity of 14 the
    ranges covered by each node are::

        1: [1, 1]   2: [1, 2]    3: [3, 3]    4: [1, 4]    5: [5, 5]
        6: [5, 6]   7: [7, 7]    8: [1, 8]    9: [9, 9]   10: [9, 10]
        11: [11, 11]   12: [9, 12]   13: [13, 13]   14: [13, 14]

    Updating index ``i`` walks upwards through ``i + lowbit(i)`` to every
    node whose range covers it; a prefix query walks downwards through
    ``i - lowbit(i)``, collecting disjoint ranges that tile ``[1, i]``.

    Note the index conventions: :meth:`update` takes the 1-indexed *tree*
    index of the element, while all other methods take 0-indexed
    positions. So ``update(k + 1, d)`` changes the element reported by
    ``value(k)`` and ``sum(k, k)``.

    Values are held in a numpy array of the specified ``dtype``. The default
    ``int64`` wraps around on overflow as fixed width integers do; use
    ``dtype=object`` for arbitrary precision Python integers.

    Instances provide no internal locking. Concurrent use requires updates
    to be mutually exclusive with each other and with queries.

    :param int capacity: The number of elements in the conceptual array.
    :param dtype: The numpy dtype used to store partial sums.
    """

    def __init__(self, capacity, *, dtype=core.DEFAULT_DTYPE):
        capacity = core.check_index(capacity, "capacity")
        if capacity < 0:
            raise ValueError("Capacity must be non-negative")
        self._capacity = capacity
        # Element 0 is a sentinel; the tree is tracked from index 1.
        self._tree = np.zeros(capacity + 1, dtype=dtype)

    @classmethod
    def from_values(cls, values, *, dtype=core.DEFAULT_DTYPE) -> FenwickTree:
        """
        Returns a new tree with one element for each of the specified values.
        """
        values = core.as_integer_array(values, dtype=dtype)
        tree = cls(len(values), dtype=dtype)
        tree.build(values)
        return tree

    @property
    def capacity(self) -> int:
        """
        The number of elements in the conceptual array.
        """
        return self._capacity

    @property
    def dtype(self):
        """
        The numpy dtype of the backing array.
        """
        return self._tree.dtype

    @property
    def tree(self) -> np.ndarray:
        """
        A read-only view of the raw backing array, including the unused
        sentinel at index 0.
        """
        view = self._tree.view()
        view.flags.writeable = False
        return view

    def __len__(self):
        return self._capacity

    def __repr__(self):
        name = self.__class__.__name__
        return f"{name}(capacity={self._capacity}, tree={self._tree})"

    def build(self, values):
        """
        Adds each of the specified values to the element at the same
        position, so that ``values[j]`` is added at tree index ``j + 1``.
        Building into an empty tree therefore loads the values.
        """
        values = core.as_integer_array(values, dtype=self._tree.dtype)
        if values.ndim != 1:
            raise ValueError("Values must be a one dimensional sequence")
        if len(values) > self._capacity:
            raise exceptions.IndexOutOfRangeError(
                f"Cannot build {len(values)} values into a tree of "
                f"capacity {self._capacity}"
            )
        logger.debug("Building Fenwick tree from %d values", len(values))
        for j, v in enumerate(values):
            self._update_tree(j + 1, v)

    def update(self, index, delta):
        """
        Adds ``delta`` to the element at the specified 1-indexed tree index.

        :raises IndexOutOfRangeError: If index is not in [1, capacity].
        """
        index = core.check_index(index)
        delta = core.check_index(delta, "delta")
        if not 0 < index <= self._capacity:
            raise exceptions.IndexOutOfRangeError(
                f"Tree index {index} out of range [1, {self._capacity}]"
            )
        self._update_tree(index, delta)

    def _update_tree(self, index, delta):
        j = index
        with np.errstate(over="ignore"):
            while j <= self._capacity:
                self._tree[j] += delta
                j = core.next_index(j)

    def sum_from_start(self, right) -> int:
        """
        Returns the sum of the elements from position 0 up to and including
        the specified position. Positions below zero give an empty prefix
        and a sum of 0; positions beyond the end are clamped to the last
        element, giving the total.
        """
        j = core.check_index(right, "right") + 1
        if j <= 0:
            return 0
        j = min(j, self._capacity)
        s = 0
        with np.errstate(over="ignore"):
            while j > 0:
                s += self._tree[j]
                j = core.prev_index(j)
        return int(s)

    def sum(self, left, right) -> int:  # noqa: A003
        """
        Returns the sum of the elements between the specified positions,
        inclusive at both ends. Returns 0 if left > right. Out of range
        positions are clamped as for :meth:`sum_from_start`.
        """
        left = core.check_index(left, "left")
        right = core.check_index(right, "right")
        if left > right:
            return 0
        return int(
            core.difference(
                self.sum_from_start(right), self.sum_from_start(left - 1), self.dtype
            )
        )

    def total(self) -> int:
        """
        Returns the sum of all elements.
        """
        return self.sum_from_start(self._capacity - 1)

    def _check_position(self, position):
        position = core.check_index(position, "position")
        if not 0 <= position < self._capacity:
            raise exceptions.IndexOutOfRangeError(
                f"Position {position} out of range [0, {self._capacity})"
            )
        return position

    def value(self, position) -> int:
        """
        Returns the element at the specified position.

        This is computed from the tree alone: the node for the position
        holds the sum of a range ending at the position, so we subtract
        the nodes tiling the rest of that range.
        """
        j = self._check_position(position) + 1
        v = self._tree[j]
        stop = core.prev_index(j)
        j -= 1
        with np.errstate(over="ignore"):
            while j != stop:
                v -= self._tree[j]
                j = core.prev_index(j)
        return int(v)

    def set_value(self, position, value):
        """
        Sets the element at the specified position to the specified value.
        """
        position = self._check_position(position)
        value = core.check_index(value, "value")
        delta = core.difference(value, self.value(position), self.dtype)
        self._update_tree(position + 1, delta)

    def find(self, target) -> int:
        """
        Returns the smallest position ``j`` such that ``sum_from_start(j)``
        is at least ``target``. Returns 0 if target is not positive and the
        capacity if target exceeds the total.

        The search descends the implicit tree in O(log n) steps and is only
        meaningful when all elements are non-negative, so that prefix sums
        are non-decreasing.
        """
        j = 0
        remaining = target
        half = core.highest_power_of_two(self._capacity)
        while half > 0:
            k = j + half
            if k <= self._capacity and self._tree[k] < remaining:
                j = k
                remaining -= self._tree[k]
            half >>= 1
        # j is the largest 1-indexed prefix with sum below target, which
        # is also the 0-indexed position of the next element.
        return j
