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
Two dimensional Fenwick tree for rectangular region sums over a grid
of integers.
"""
from __future__ import annotations

import logging

import numpy as np

from fenwick import core
from fenwick import exceptions

logger: logging.Logger = logging.getLogger(__name__)


class FenwickTree2D:
    """
    A two dimensional Fenwick tree over an ``m x n`` grid of integers,
    supporting single cell assignment and rectangular region sums in
    O(log m * log n) time.

    Two representations are kept side by side. The ``(m + 1) x (n + 1)``
    tree holds partial sums, with node ``(r, c)`` holding the sum of the
    cells in ``(r - lowbit(r), r] x (c - lowbit(c), c]`` (1-indexed), and
    row and column 0 unused. The ``m x n`` array of current values is the
    source of truth for each cell: the tree only supports adding deltas,
    so assigning an absolute value to a cell has to read the old value
    first.

    An empty matrix (no rows or no columns) gives a degenerate tree, on
    which :meth:`update` does nothing and every sum is 0.

    Rows and columns passed to the public methods are 0-indexed.

    :param matrix: A rectangular two dimensional array of integers.
    :param dtype: The numpy dtype used to store values and partial sums.
    """

    def __init__(self, matrix, *, dtype=core.DEFAULT_DTYPE):
        try:
            rows = [list(row) for row in matrix]
        except TypeError:
            raise exceptions.DimensionMismatchError(
                "Matrix must be a two dimensional array"
            )
        m = len(rows)
        n = 0 if m == 0 else len(rows[0])
        bad_rows = [j for j, row in enumerate(rows) if len(row) != n]
        if len(bad_rows) > 0:
            raise exceptions.DimensionMismatchError(
                f"Rows at indexes {bad_rows} do not have length {n}"
            )
        self._m = m
        self._n = n
        self._tree = np.zeros((m + 1, n + 1), dtype=dtype)
        if self.degenerate:
            logger.debug("Empty %d x %d matrix; all sums will be zero", m, n)
            self._current = np.zeros((m, n), dtype=dtype)
            return
        try:
            self._current = core.as_integer_array(rows, dtype=dtype)
        except ValueError:
            # numpy rejects cells nested to uneven depths
            raise exceptions.DimensionMismatchError(
                "Matrix must be a two dimensional array"
            )
        if self._current.ndim != 2:
            raise exceptions.DimensionMismatchError(
                "Matrix must be a two dimensional array"
            )
        logger.debug("Building %d x %d Fenwick tree", m, n)
        for row in range(m):
            for col in range(n):
                self._update_tree(row + 1, col + 1, self._current[row, col])

    @property
    def shape(self):
        """
        The ``(rows, columns)`` dimensions of the grid.
        """
        return self._m, self._n

    @property
    def degenerate(self) -> bool:
        """
        True if the grid has no rows or no columns.
        """
        return self._m == 0 or self._n == 0

    @property
    def dtype(self):
        """
        The numpy dtype of the backing array.
        """
        return self._tree.dtype

    @property
    def tree(self) -> np.ndarray:
        """
        A read-only view of the raw ``(m + 1) x (n + 1)`` backing grid.
        """
        view = self._tree.view()
        view.flags.writeable = False
        return view

    def __repr__(self):
        return f"{self.__class__.__name__}(shape={self.shape}, tree={self._tree})"

    def _check_cell(self, row, col):
        row = core.check_index(row, "row")
        col = core.check_index(col, "col")
        if not (0 <= row < self._m and 0 <= col < self._n):
            raise exceptions.IndexOutOfRangeError(
                f"Cell ({row}, {col}) out of range for grid of shape {self.shape}"
            )
        return row, col

    def _update_tree(self, tree_row, tree_col, delta):
        i = tree_row
        with np.errstate(over="ignore"):
            while i <= self._m:
                # The column walk restarts for every row node.
                j = tree_col
                while j <= self._n:
                    self._tree[i, j] += delta
                    j = core.next_index(j)
                i = core.next_index(i)

    def update(self, row, col, value):
        """
        Sets the cell at the specified row and column to the specified
        value. Does nothing on a degenerate tree.

        :raises IndexOutOfRangeError: If the cell is outside the grid.
        """
        if self.degenerate:
            return
        row, col = self._check_cell(row, col)
        value = core.check_index(value, "value")
        delta = core.difference(value, self._current[row, col], self.dtype)
        self._current[row, col] = value
        self._update_tree(row + 1, col + 1, delta)

    def increment(self, row, col, delta):
        """
        Adds the specified delta to the cell at the specified row and column.
        Does nothing on a degenerate tree.
        """
        if self.degenerate:
            return
        row, col = self._check_cell(row, col)
        delta = core.check_index(delta, "delta")
        with np.errstate(over="ignore"):
            self._current[row, col] += delta
        self._update_tree(row + 1, col + 1, delta)

    def value(self, row, col) -> int:
        """
        Returns the current value of the specified cell.
        """
        row, col = self._check_cell(row, col)
        return int(self._current[row, col])

    def _sum_from_start(self, tree_row, tree_col):
        s = 0
        i = tree_row
        with np.errstate(over="ignore"):
            while i > 0:
                j = tree_col
                while j > 0:
                    s += self._tree[i, j]
                    j = core.prev_index(j)
                i = core.prev_index(i)
        return s

    def sum_region(self, row1, col1, row2, col2) -> int:
        """
        Returns the sum of the cells in the rectangle with top-left corner
        ``(row1, col1)`` and bottom-right corner ``(row2, col2)``, inclusive.
        Returns 0 on a degenerate tree.

        The corners are not checked: it is the caller's responsibility to
        ensure that ``0 <= row1 <= row2 < m`` and ``0 <= col1 <= col2 < n``.
        The result for any other rectangle is undefined.
        """
        if self.degenerate:
            return 0
        row1 = core.check_index(row1, "row1")
        col1 = core.check_index(col1, "col1")
        row2 = core.check_index(row2, "row2")
        col2 = core.check_index(col2, "col2")
        with np.errstate(over="ignore"):
            return int(
                self._sum_from_start(row2 + 1, col2 + 1)
                - self._sum_from_start(row2 + 1, col1)
                - self._sum_from_start(row1, col2 + 1)
                + self._sum_from_start(row1, col1)
            )

    def total(self) -> int:
        """
        Returns the sum of every cell in the grid.
        """
        if self.degenerate:
            return 0
        return int(self._sum_from_start(self._m, self._n))
