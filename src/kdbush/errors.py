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
Exceptions raised by the index builders, and the checks raising them.
"""
import numbers


class InvalidConfiguration(ValueError):
    """Raised when an index cannot be built with the given parameters.

    Nothing is built when this is raised: construction fails before any
    array is allocated.
    """


def check_integer(name, value, minimum):
    """Raise InvalidConfiguration unless value is an integer >= minimum."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidConfiguration(
            "{} must be an integer, got {!r}".format(name, value))
    if value < minimum:
        raise InvalidConfiguration(
            "{} must be at least {}, got {}".format(name, minimum, value))


def check_node_size(node_size):
    check_integer("node_size", node_size, 1)
