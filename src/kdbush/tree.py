# Copyright (C) 2018 DataStorm
#
# This file is part of kdbush.
#
# kdbush is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# kdbush is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
"""
Flat KD-tree over 2D points.

The tree has no node objects. A range `[left, right]` of the index arrays is
an internal node when it holds more than `node_size + 1` points; its split
point sits at `mid = (left + right) // 2` and its children are
`[left, mid - 1]` and `[mid + 1, right]`. The splitting axis alternates
between x and y with depth. Leaves are scanned with numpy over array slices.
"""
import numpy

from .errors import check_node_size


class KDBush():
    """
    Static spatial index for 2D points.

    Instances are built by :func:`kdbush.build` (or :func:`kdbush.fill`,
    :func:`kdbush.from_arrays`) and never change afterwards. The arrays are
    flagged as non-writeable, so the index can be shared by any number of
    readers.

    Args:
        ids: value of the ids attribute.
        coords: value of the coords attribute.
        node_size: value of the node_size attribute.

    Attributes:
        ids (1d-int-array): original id of the point stored at each position.
        coords (1d-float-array): interleaved (x, y) pairs in the same order
            as ids.
        node_size (int): largest range left unpartitioned at the bottom of
            the tree.
    """
    __slots__ = ('_ids', '_coords', '_node_size')

    def __init__(self, ids, coords, node_size):
        check_node_size(node_size)
        if len(coords) != 2 * len(ids):
            raise ValueError(
                "Expected {} coordinates for {} ids, got {}"
                .format(2 * len(ids), len(ids), len(coords)))
        ids = numpy.array(ids, dtype=numpy.intp)
        coords = numpy.array(coords, dtype=numpy.float64)
        ids.flags.writeable = False
        coords.flags.writeable = False
        self._ids = ids
        self._coords = coords
        self._node_size = int(node_size)

    @property
    def ids(self):
        return self._ids

    @property
    def coords(self):
        return self._coords

    @property
    def node_size(self):
        return self._node_size

    @property
    def points(self):
        """Read-only (n, 2) view of the coordinates, in index order."""
        return self._coords.reshape(-1, 2)

    def __len__(self):
        """Returns the number of indexed points."""
        return len(self._ids)

    def __repr__(self):
        return "<{} of {} points, node_size={}>".format(
            self.__class__.__name__, len(self), self._node_size)

    def range(self, min_x, min_y, max_x, max_y, visitor=None):
        """
        Finds all points within the given bounding box, bounds included.

        Args:
            min_x, min_y, max_x, max_y (float): the query box.
            visitor (callable, optional): called with the id of every
                matching point, once per point.

        Returns:
            None if a visitor is given, else the list of matching ids in
            traversal order.
        """
        matches = self.iter_range(min_x, min_y, max_x, max_y)
        return _report(matches, visitor)

    def within(self, x, y, radius, visitor=None):
        """
        Finds all points within `radius` of `(x, y)`, boundary included.

        Same reporting conventions as :meth:`range`.
        """
        return _report(self.iter_within(x, y, radius), visitor)

    def iter_range(self, min_x, min_y, max_x, max_y):
        """Lazily yields the ids of the points within the bounding box."""
        ids = self._ids
        coords = self._coords
        node_size = self._node_size
        if not len(ids):
            return

        stack = [(0, len(ids) - 1, 0)]
        while stack:
            left, right, axis = stack.pop()

            if right - left <= node_size:
                xs = coords[2 * left:2 * right + 2:2]
                ys = coords[2 * left + 1:2 * right + 2:2]
                inside = ((xs >= min_x) & (xs <= max_x)
                          & (ys >= min_y) & (ys <= max_y))
                yield from ids[left:right + 1][inside].tolist()
                continue

            mid = (left + right) >> 1
            x = coords[2 * mid]
            y = coords[2 * mid + 1]

            if min_x <= x <= max_x and min_y <= y <= max_y:
                yield int(ids[mid])

            # Right is pushed first so the left child is popped first.
            # Negated tests keep both children of a NaN split value.
            if not ((max_x < x) if axis == 0 else (max_y < y)):
                stack.append((mid + 1, right, 1 - axis))
            if not ((min_x > x) if axis == 0 else (min_y > y)):
                stack.append((left, mid - 1, 1 - axis))

    def iter_within(self, x, y, radius):
        """Lazily yields the ids of the points within `radius` of (x, y)."""
        ids = self._ids
        coords = self._coords
        node_size = self._node_size
        if not len(ids) or radius < 0:
            return

        r2 = radius * radius
        stack = [(0, len(ids) - 1, 0)]
        while stack:
            left, right, axis = stack.pop()

            if right - left <= node_size:
                dx = coords[2 * left:2 * right + 2:2] - x
                dy = coords[2 * left + 1:2 * right + 2:2] - y
                inside = dx * dx + dy * dy <= r2
                yield from ids[left:right + 1][inside].tolist()
                continue

            mid = (left + right) >> 1
            mx = coords[2 * mid]
            my = coords[2 * mid + 1]

            if sq_dist(mx, my, x, y) <= r2:
                yield int(ids[mid])

            if not ((x + radius < mx) if axis == 0 else (y + radius < my)):
                stack.append((mid + 1, right, 1 - axis))
            if not ((x - radius > mx) if axis == 0 else (y - radius > my)):
                stack.append((left, mid - 1, 1 - axis))


def sq_dist(ax, ay, bx, by):
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def _report(matches, visitor):
    if visitor is None:
        return list(matches)
    for idx in matches:
        visitor(idx)
