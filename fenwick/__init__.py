# Turn off flake8 and reorder-python-imports for this file.
# flake8: NOQA
# noreorder
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
Fenwick trees (binary indexed trees) for prefix sums over one dimensional
arrays and rectangular region sums over two dimensional grids of integers.
"""

from fenwick.core import __version__

from fenwick.exceptions import (
    DimensionMismatchError,
    FenwickException,
    IndexOutOfRangeError,
)

from fenwick.tree import FenwickTree
from fenwick.tree2d import FenwickTree2D

__all__ = [
    "DimensionMismatchError",
    "FenwickException",
    "FenwickTree",
    "FenwickTree2D",
    "IndexOutOfRangeError",
]
