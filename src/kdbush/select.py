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
KD-sort of a flat point buffer.

The points are kept in two parallel buffers: `ids` holds the identity of the
point at each position and `coords` its interleaved (x, y) pair, so that
position `i` in `ids` matches `coords[2*i]` and `coords[2*i + 1]`. Sorting
never separates them.

The tree is implicit: a range `[left, right]` is split at
`mid = (left + right) // 2` after a selection on the x axis at even depth
and on the y axis at odd depth. No node is ever stored.

NaN sorts after every number, so that a NaN coordinate never breaks the
ordering of the finite ones.
"""
import math


# Above this range length, Floyd-Rivest narrows the range on a sample first.
SAMPLE_THRESHOLD = 600


def sort_kd(ids, coords, node_size, left, right, axis=0):
    """Partition `ids[left:right+1]` recursively around median positions.

    Ranges of `node_size + 1` points or fewer are left unordered. Both
    buffers are modified in place.
    """
    if right - left <= node_size:
        return
    mid = (left + right) >> 1
    select(ids, coords, mid, left, right, axis)
    sort_kd(ids, coords, node_size, left, mid - 1, 1 - axis)
    sort_kd(ids, coords, node_size, mid + 1, right, 1 - axis)


def select(ids, coords, k, left, right, axis):
    """
    Floyd-Rivest selection on one axis.

    Rearranges positions `left..right` so that every point before `k` has a
    coordinate on `axis` lower than or equal to the one at `k`, and every
    point after `k` a greater or equal one.

    Args:
        ids (list of int): point identities, permuted in place.
        coords (list of float): interleaved coordinates, permuted in place.
        k (int): target position.
        left (int): first position of the range.
        right (int): last position of the range (inclusive).
        axis (int): 0 for x, 1 for y.
    """
    while right > left:
        if right - left > SAMPLE_THRESHOLD:
            n = right - left + 1
            m = k - left + 1
            z = math.log(n)
            s = 0.5 * math.exp(2 * z / 3)
            sd = 0.5 * math.sqrt(z * s * (n - s) / n)
            if m < n / 2:
                sd = -sd
            new_left = max(left, int(math.floor(k - m * s / n + sd)))
            new_right = min(right, int(math.floor(k + (n - m) * s / n + sd)))
            select(ids, coords, k, new_left, new_right, axis)

        t = coords[2 * k + axis]
        i = left
        j = right

        swap_item(ids, coords, left, k)
        if _less(t, coords[2 * right + axis]):
            swap_item(ids, coords, left, right)

        while i < j:
            swap_item(ids, coords, i, j)
            i += 1
            j -= 1
            while _less(coords[2 * i + axis], t):
                i += 1
            while _less(t, coords[2 * j + axis]):
                j -= 1

        if _same(coords[2 * left + axis], t):
            swap_item(ids, coords, left, j)
        else:
            j += 1
            swap_item(ids, coords, j, right)

        if j <= k:
            left = j + 1
        if k <= j:
            right = j - 1


def swap_item(ids, coords, i, j):
    ids[i], ids[j] = ids[j], ids[i]
    coords[2 * i], coords[2 * j] = coords[2 * j], coords[2 * i]
    coords[2 * i + 1], coords[2 * j + 1] = coords[2 * j + 1], coords[2 * i + 1]


def _less(a, b):
    # Total order with NaN last: x != x only holds for NaN.
    return a < b or (b != b and a == a)


def _same(a, b):
    return a == b or (a != a and b != b)
