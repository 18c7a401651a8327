"""
Fast static spatial index for 2D points.

A KDBush index is a KD-tree without nodes: the points are laid out in two
flat arrays (ids and interleaved coordinates) so that the tree structure is
implied by positions alone. It is built once and can then answer bounding
box and radius queries.

    >>> import kdbush
    >>> index = kdbush.build([(0., 0.), (1., 1.), (5., 5.)], node_size=16)
    >>> sorted(index.range(0., 0., 2., 2.))
    [0, 1]
    >>> index.within(5., 5., 1.)
    [2]
"""
from .build import build, fill, from_arrays, DEFAULT_NODE_SIZE  # noqa: F401
from .errors import InvalidConfiguration  # noqa: F401
from .tree import KDBush  # noqa: F401

__version__ = "0.1.0"
