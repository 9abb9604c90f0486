""" Cells and bilinear interpolation.

A cell is the unit square of four grid points that surrounds a continuous
position. Positions are floating point indices associated with the
1-based grid indices, i.e. the rounded value of a position is a grid index.
"""

import math
import numbers

from ._gridpoint import GridPoint, get_value, estimate_vertex_gradient


class Cell:
    """ Cell(position, bounds=None) or Cell(x, y)

    Cell defined by the four corner points around the position (x, y).
    The bottom-left corner is obtained by flooring each coordinate; the
    other corners follow from it.

    If bounds (ni, nj) are given, coordinates that are equal to or larger
    than their bound are moved back by one before flooring, so that the
    cell at the last grid index still lies within the grid.

    Iteration order is: bottom left, bottom right, top left, top right.
    Indexing with 1-4 follows the same order.
    """

    __slots__ = ['_bottom_left', '_bottom_right', '_top_right', '_top_left']

    def __init__(self, position, bounds=None):
        if isinstance(position, numbers.Real) and isinstance(bounds, numbers.Real):
            position, bounds = (position, bounds), None
        x, y = position
        if bounds is not None:
            ni, nj = bounds
            x = x - 1 if x >= ni else x
            y = y - 1 if y >= nj else y
        corner = GridPoint(math.floor(x), math.floor(y))
        self._set_corners(corner)

    @classmethod
    def from_corner(cls, bottom_left):
        """ Create the cell that has the given grid point as its
        bottom-left corner.
        """
        cell = cls.__new__(cls)
        cell._set_corners(GridPoint(bottom_left))
        return cell

    def _set_corners(self, corner):
        object.__setattr__(self, '_bottom_left', corner)
        object.__setattr__(self, '_bottom_right', corner.right)
        object.__setattr__(self, '_top_right', corner.top.right)
        object.__setattr__(self, '_top_left', corner.top)

    def __setattr__(self, name, value):
        raise AttributeError('Cell objects are immutable.')

    def __reduce__(self):
        return Cell.from_corner, (self._bottom_left, )

    def __repr__(self):
        i, j = self._bottom_left
        return '<Cell (%i, %i)-(%i, %i)>' % (i, j, i + 1, j + 1)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self):
        return hash((Cell, ) + tuple(self))

    def __len__(self):
        return 4

    def __iter__(self):
        yield self._bottom_left
        yield self._bottom_right
        yield self._top_left
        yield self._top_right

    def __getitem__(self, index):
        if not isinstance(index, numbers.Integral) or not 1 <= index <= 4:
            raise IndexError('Cell index must be 1, 2, 3 or 4, not %r.' % (index, ))
        return tuple(self)[index - 1]

    @property
    def bottom_left(self):
        return self._bottom_left

    @property
    def bottom_right(self):
        return self._bottom_right

    @property
    def top_right(self):
        return self._top_right

    @property
    def top_left(self):
        return self._top_left


def lerp(a, b, w):
    """ lerp(a, b, w)

    Linear interpolation between a and b with weight w.
    Works for any values that support addition and scalar multiplication.
    """
    return a * (1 - w) + b * w


def bilinear_weights(cell, position):
    """ bilinear_weights(cell, position)

    Get the bilinear weights for all four corners of the cell, in cell
    iteration order. The weights always sum to one; they are not clamped
    for positions outside the cell.

    Extracting bilinear weights with this function may be useful when they
    are to be combined with other weights. If you want to interpolate a
    value directly, use interpolate_bilinear(), which is faster.
    """
    x, y = position
    cx, cy = cell.bottom_left
    w1 = ((cx + 1) - x) * ((cy + 1) - y)
    w2 = (x - cx) * ((cy + 1) - y)
    w3 = ((cx + 1) - x) * (y - cy)
    w4 = (x - cx) * (y - cy)
    return w1, w2, w3, w4


def interpolate_bilinear(field, position, cell=None):
    """ interpolate_bilinear(field, position, cell=None)

    Perform a bilinear interpolation of the field at the position (x, y).

    The cell can be given if it is already known (e.g. because the
    gradient is estimated at the same location), otherwise it is
    calculated from the position. Cells that reach outside the field
    raise an IndexError.
    """
    x, y = position
    if cell is None:
        cell = Cell(position)
    cx, cy = cell.bottom_left
    nx0 = lerp(get_value(field, cell.bottom_left), get_value(field, cell.bottom_right), x - cx)
    nx1 = lerp(get_value(field, cell.top_left), get_value(field, cell.top_right), x - cx)
    return lerp(nx0, nx1, y - cy)


def estimate_gradient(field, location, cell=None, bounds=None):
    """ estimate_gradient(field, location, cell=None, bounds=None)

    Estimate the gradient of the field at the given location.

    If the location is a continuous position (x, y), the exact gradient
    of the bilinear surface spanned by the cell is returned. The cell can
    be given if it is already known.

    If the location is a GridPoint, the gradient is estimated with centered
    finite differences instead, see estimate_vertex_gradient(). In this case
    the grid bounds may be given (default the shape of the field).

    Returns a tuple (gx, gy).
    """
    if isinstance(location, GridPoint):
        if cell is not None:
            raise ValueError('estimate_gradient() at a grid point takes no cell.')
        return estimate_vertex_gradient(field, location, bounds)

    x, y = location
    if cell is None:
        cell = Cell(location)
    cx, cy = cell.bottom_left
    bl = get_value(field, cell.bottom_left)
    br = get_value(field, cell.bottom_right)
    tl = get_value(field, cell.top_left)
    tr = get_value(field, cell.top_right)
    gx = lerp(br - bl, tr - tl, x - cx)
    gy = lerp(tr - br, tl - bl, y - cy)
    return gx, gy
