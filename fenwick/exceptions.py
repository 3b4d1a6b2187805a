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
Exceptions defined in fenwick.
"""


class FenwickException(Exception):
    """
    Superclass of all exceptions thrown.
    """


class IndexOutOfRangeError(FenwickException, IndexError):
    """
    An index or position fell outside the extent of a tree.
    """


class DimensionMismatchError(FenwickException, ValueError):
    """
    The rows of an input matrix do not all have the same length, or the
    input is not two dimensional.
    """
