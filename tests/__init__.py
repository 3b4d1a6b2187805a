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
Common code for the fenwick test cases.
"""
import numpy as np


class NaiveFenwickTree:
    """
    A class providing the same interface as the Fenwick tree, but implemented
    in a naive fashion for testing.
    """

    def __init__(self, capacity):
        self.values = [0 for _ in range(capacity)]

    def update(self, index, delta):
        self.values[index - 1] += delta

    def sum_from_start(self, right):
        right = min(right, len(self.values) - 1)
        return sum(self.values[: right + 1]) if right >= 0 else 0

    def sum(self, left, right):  # noqa: A003
        if left > right:
            return 0
        return self.sum_from_start(right) - self.sum_from_start(left - 1)

    def find(self, target):
        j = 0
        s = 0
        while j < len(self.values) and s + self.values[j] < target:
            s += self.values[j]
            j += 1
        return j


class NaiveFenwickTree2D:
    """
    A grid supporting the same operations as the 2D Fenwick tree by
    summing cells directly.
    """

    def __init__(self, matrix):
        self.grid = np.array(matrix, dtype=np.int64)

    def update(self, row, col, value):
        self.grid[row, col] = value

    def sum_region(self, row1, col1, row2, col2):
        return int(np.sum(self.grid[row1 : row2 + 1, col1 : col2 + 1]))
