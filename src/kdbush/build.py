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
Builders of a :class:`kdbush.tree.KDBush` index.

The builders all funnel into :func:`build`: the points are copied into flat
buffers, kd-sorted (see :mod:`kdbush.select`) and frozen into read-only
arrays.
"""
import logging
import time

import numpy
import toolz

from . import select
from . import tree
from .errors import InvalidConfiguration, check_integer, check_node_size


logger = logging.getLogger(__name__)

DEFAULT_NODE_SIZE = 64


def _flatten(points):
    if isinstance(points, numpy.ndarray):
        if points.size and (points.ndim != 2 or points.shape[1] != 2):
            raise ValueError(
                "Points array must be of shape (n, 2), got {}"
                .format(points.shape))
        return points.astype(numpy.float64).ravel().tolist()
    pairs = [tuple(point) for point in points]
    for pair in pairs:
        if len(pair) != 2:
            raise ValueError(
                "Points must be (x, y) pairs, got {!r}".format(pair))
    return [float(c) for c in toolz.concat(pairs)]


def build(points, node_size=DEFAULT_NODE_SIZE):
    """
    Build a static index over `points`.

    Args:
        points (iterable of (x, y)): The points to index, or an array of
            shape (n, 2). Their order defines their ids 0..n-1.
        node_size (int, optional): Largest range left unpartitioned at the
            bottom of the tree. Defaults to 64.

    Returns:
        KDBush: the immutable index.

    Raises:
        InvalidConfiguration: if node_size is not an integer >= 1.
    """
    check_node_size(node_size)
    coords = _flatten(points)
    n = len(coords) // 2
    ids = list(range(n))

    t1 = time.perf_counter()
    if n:
        select.sort_kd(ids, coords, node_size, 0, n - 1, 0)
    t2 = time.perf_counter()
    logger.debug("Indexed %d points with node_size=%d in %.6fs",
                 n, node_size, t2 - t1)

    return tree.KDBush(
        numpy.array(ids, dtype=numpy.intp),
        numpy.array(coords, dtype=numpy.float64),
        node_size,
    )


def fill(points, size, node_size=DEFAULT_NODE_SIZE):
    """
    Build an index from the first `size` points of an iterator.

    Only `size` items are consumed from `points`, which may be infinite.

    Raises:
        InvalidConfiguration: if node_size is invalid, if size is negative,
            or if `points` runs out before `size` items.
    """
    check_node_size(node_size)
    check_integer("size", size, 0)
    taken = list(toolz.take(size, points))
    if len(taken) < size:
        raise InvalidConfiguration(
            "Expected {} points but the iterator held only {}"
            .format(size, len(taken)))
    return build(taken, node_size)


def from_arrays(xs, ys, node_size=DEFAULT_NODE_SIZE):
    """Build an index from parallel sequences of x and y coordinates."""
    xs = numpy.asarray(xs, dtype=numpy.float64).ravel()
    ys = numpy.asarray(ys, dtype=numpy.float64).ravel()
    if xs.shape != ys.shape:
        raise ValueError(
            "Coordinate arrays must be of same length, got {} and {}"
            .format(len(xs), len(ys)))
    return build(numpy.column_stack([xs, ys]), node_size)
