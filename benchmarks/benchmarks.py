# MIT License
#
# Copyright (c) 2026 Fenwick Developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""
Benchmarks for fenwick using airspeed velocity. Run them with ``asv run``
from the repository root.
"""
import numpy as np

import fenwick


class FenwickTreeBenchmark:
    params = [10**3, 10**5]
    param_names = ["capacity"]

    def setup(self, capacity):
        rng = np.random.default_rng(42)
        self.values = rng.integers(-1000, 1000, size=capacity)
        self.indexes = rng.integers(1, capacity + 1, size=1000)
        self.tree = fenwick.FenwickTree.from_values(self.values)

    def time_build(self, capacity):
        fenwick.FenwickTree.from_values(self.values)

    def time_update(self, capacity):
        for j in self.indexes:
            self.tree.update(j, 1)

    def time_sum(self, capacity):
        for j in self.indexes:
            self.tree.sum(j // 2, j)

    def time_find(self, capacity):
        tree = fenwick.FenwickTree.from_values(np.abs(self.values))
        total = tree.total()
        for j in self.indexes:
            tree.find(total * j // capacity)

    def peakmem_build(self, capacity):
        fenwick.FenwickTree.from_values(self.values)


class FenwickTree2DBenchmark:
    params = [10, 100]
    param_names = ["side"]

    def setup(self, side):
        rng = np.random.default_rng(43)
        self.matrix = rng.integers(-1000, 1000, size=(side, side))
        self.cells = rng.integers(0, side, size=(1000, 2))
        self.tree = fenwick.FenwickTree2D(self.matrix)

    def time_build(self, side):
        fenwick.FenwickTree2D(self.matrix)

    def time_update(self, side):
        for row, col in self.cells:
            self.tree.update(row, col, 1)

    def time_sum_region(self, side):
        for row, col in self.cells:
            self.tree.sum_region(row // 2, col // 2, row, col)
