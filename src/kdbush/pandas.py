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
Module wrapping pandas DataFrames.
"""
import pandas

from .build import DEFAULT_NODE_SIZE, from_arrays


class FrameIndex():
    """
    DataFrame paired with a spatial index over two of its numeric columns.

    Queries return the matching rows of the frame, in the frame's order.

    Attributes
    ----------
    frame: pandas DataFrame
    index: KDBush
        Built over the `x` and `y` columns, point ids being row positions.
    """

    __slots__ = ('frame', 'index', 'x', 'y')

    def __init__(self, frame, x='x', y='y', node_size=DEFAULT_NODE_SIZE):
        missing = [col for col in (x, y) if col not in frame.columns]
        if missing:
            raise ValueError("Columns {} not found in frame.".format(missing))
        self.frame = frame
        self.x = x
        self.y = y
        self.index = from_arrays(
            frame[x].to_numpy(dtype=float),
            frame[y].to_numpy(dtype=float),
            node_size,
        )

    def __len__(self):
        return len(self.frame)

    def range(self, min_x, min_y, max_x, max_y):
        """
        Rows whose point lies within the bounding box.

        Returns
        -------
        pandas DataFrame
        """
        return self._rows(self.index.range(min_x, min_y, max_x, max_y))

    def within(self, x, y, radius, include_distance=False):
        """
        Rows whose point lies within `radius` of `(x, y)`.

        Parameters
        ----------
        include_distance: bool (default False)
            Add a `distance_` column with the euclidean distance to `(x, y)`.

        Returns
        -------
        pandas DataFrame
        """
        rows = self._rows(self.index.within(x, y, radius))
        if include_distance:
            dx = rows[self.x].to_numpy(dtype=float) - x
            dy = rows[self.y].to_numpy(dtype=float) - y
            rows = rows.assign(distance_=(dx * dx + dy * dy) ** 0.5)
        return rows

    def _rows(self, ids):
        return self.frame.iloc[sorted(ids)]


def index_frame(frame, x='x', y='y', node_size=DEFAULT_NODE_SIZE):
    """Shortcut for :class:`FrameIndex`."""
    if not isinstance(frame, pandas.DataFrame):
        raise ValueError("Unrecognized type for frame: {}"
                         .format(type(frame).__name__))
    return FrameIndex(frame, x, y, node_size)
