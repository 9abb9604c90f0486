""" Grid points: integer vertices of a regular 2D grid.

Grid indices are 1-based. The point ``GridPoint(i, j)`` refers to the
element ``field[i-1, j-1]`` of a (0-based) numpy array, and a point is
inside a grid of shape ``(ni, nj)`` when ``1 <= i <= ni`` and
``1 <= j <= nj``.
"""

import numbers

import numpy as np


class GridPoint:
    """ GridPoint(i, j) or GridPoint((i, j))

    Point on a grid. This is not a cell, which represents a whole face
    and not a vertex.

    A grid point is an immutable value: two points with the same indices
    are equal and hash the same. The directional neighbors (``left``,
    ``right``, ``bottom``, ``top``) are computed when accessed, so they can
    be chained, e.g. ``point.top.left`` is the top-left diagonal neighbor.
    """

    __slots__ = ['_i', '_j']

    def __init__(self, *args):
        if len(args) == 1:
            args = tuple(args[0])
        if len(args) != 2:
            raise ValueError('GridPoint needs exactly two indices.')
        i, j = [_as_index(v) for v in args]
        object.__setattr__(self, '_i', i)
        object.__setattr__(self, '_j', j)

    @classmethod
    def nearest(cls, position):
        """ Get the grid point closest to the given continuous position.
        """
        return cls(nearest(position))

    def __setattr__(self, name, value):
        raise AttributeError('GridPoint objects are immutable.')

    def __reduce__(self):
        return GridPoint, (self._i, self._j)

    def __repr__(self):
        return 'GridPoint(%i, %i)' % (self._i, self._j)

    def __eq__(self, other):
        if not isinstance(other, GridPoint):
            return NotImplemented
        return self._i == other._i and self._j == other._j

    def __hash__(self):
        return hash((GridPoint, self._i, self._j))

    def __iter__(self):
        yield self._i
        yield self._j

    def __len__(self):
        return 2

    @property
    def i(self):
        """ The index along the first (x) axis.
        """
        return self._i

    @property
    def j(self):
        """ The index along the second (y) axis.
        """
        return self._j

    def coordinates(self):
        """ Get the indices of this point as an (i, j) tuple.
        """
        return self._i, self._j

    def offset(self, di, dj):
        """ Get the point shifted by the integer offset (di, dj).
        """
        return GridPoint(self._i + di, self._j + dj)

    @property
    def left(self):
        return self.offset(-1, 0)

    @property
    def right(self):
        return self.offset(1, 0)

    @property
    def bottom(self):
        return self.offset(0, -1)

    @property
    def top(self):
        return self.offset(0, 1)


def _as_index(value):
    # Integral floats (e.g. from a float position) are fine, fractions are not
    if isinstance(value, numbers.Integral):
        return int(value)
    elif isinstance(value, numbers.Real):
        if int(value) != value:
            raise ValueError('Grid indices must be integers, not %r.' % value)
        return int(value)
    else:
        raise TypeError('Grid indices must be numbers, not %r.' % type(value).__name__)


def nearest(position):
    """ nearest(position)

    Round the continuous position (x, y) to the nearest integer pair.
    Uses Python's round(), which rounds ties to the nearest even integer
    (like numpy), so ``nearest((2.5, 3.5)) == (2, 4)``.
    """
    x, y = position
    return int(round(x)), int(round(y))


## Neighbors

_DIRECTIONS = ('left', 'right', 'bottom', 'top')


def neighbor(point, which):
    """ neighbor(point, which)

    Get a direct neighbor of the given grid point. ``which`` is either an
    index 1-4 or a name, corresponding to left, right, bottom and top.
    """
    if isinstance(which, str):
        name = which.lower()
        if name not in _DIRECTIONS:
            raise ValueError('Unknown neighbor direction %r.' % which)
    elif (isinstance(which, numbers.Integral) and not isinstance(which, bool)
            and 1 <= which <= 4):
        name = _DIRECTIONS[int(which) - 1]
    else:
        raise ValueError('Neighbor index must be 1, 2, 3 or 4, not %r.' % (which, ))
    return getattr(point, name)


class Neighborhood:
    """ Base class for a set of grid points considered close to a
    given grid point.
    """

    size = 0

    def points(self, point):
        raise NotImplementedError()


class FourNeighbors(Neighborhood):
    """ Four closest points, directly adjacent to the current grid point.
    """

    size = 4

    def points(self, point):
        return point.left, point.right, point.bottom, point.top


class EightNeighbors(Neighborhood):
    """ Eight closest points, including the four closest plus the slightly
    farthest grid point corners.

    The points are ordered counter-clockwise, starting at the top-left corner.
    """

    size = 8

    def points(self, point):
        return (point.top.left, point.left, point.bottom.left, point.bottom,
                point.bottom.right, point.right, point.top.right, point.top)


_NEIGHBORHOODS = {4: FourNeighbors, 'four': FourNeighbors,
                  8: EightNeighbors, 'eight': EightNeighbors}


def neighbors(point, kind=FourNeighbors):
    """ neighbors(point, kind=FourNeighbors)

    Get the grid points in the neighborhood of the given point, as a tuple.

    Parameters
    ----------
    point : GridPoint
        The point to get the neighbors of.
    kind : Neighborhood class or instance, int or str
        Which neighborhood to use. Can be FourNeighbors (4, 'four') or
        EightNeighbors (8, 'eight'). Default FourNeighbors.
    """
    if isinstance(kind, Neighborhood):
        return kind.points(point)
    elif isinstance(kind, type) and issubclass(kind, Neighborhood):
        return kind().points(point)
    key = kind.lower() if isinstance(kind, str) else kind
    try:
        cls = _NEIGHBORHOODS[key]
    except (KeyError, TypeError):
        raise ValueError('Unknown neighborhood %r.' % (kind, ))
    return cls().points(point)


## Grid membership

def is_inside_grid(point, bounds):
    """ is_inside_grid(point, bounds)

    Get whether the point (a GridPoint or (i, j) pair) lies on a grid with
    the given bounds (ni, nj). The range check is 1-based and inclusive.
    """
    x, y = point
    ni, nj = bounds
    return 1 <= x <= ni and 1 <= y <= nj


def is_outside_grid(point, bounds):
    """ is_outside_grid(point, bounds)

    The negation of is_inside_grid().
    """
    return not is_inside_grid(point, bounds)


def grid_bounds(bounds_or_array):
    """ Get the (ni, nj) bounds from a bounds tuple or an array.
    """
    if isinstance(bounds_or_array, np.ndarray) and bounds_or_array.ndim >= 2:
        return bounds_or_array.shape[0], bounds_or_array.shape[1]
    if (len(bounds_or_array) == 2 and
            all(isinstance(n, numbers.Real) for n in bounds_or_array)):
        return _as_index(bounds_or_array[0]), _as_index(bounds_or_array[1])
    # Nested sequence, only look at the first row
    try:
        return len(bounds_or_array), len(bounds_or_array[0])
    except (TypeError, IndexError):
        raise ValueError('Need a pair of integer bounds, or an array '
                         'with at least two dimensions.')


def materialize_grid(bounds_or_array):
    """ materialize_grid(bounds_or_array)

    Create all grid points of a grid. The grid is specified by its bounds
    (ni, nj), or by an array whose first two dimensions are used.

    Returns a numpy object array of shape (ni, nj), in which the element
    at [i-1, j-1] is GridPoint(i, j).
    """
    ni, nj = grid_bounds(bounds_or_array)
    grid = np.empty((ni, nj), dtype=object)
    for i in range(1, ni + 1):
        for j in range(1, nj + 1):
            grid[i - 1, j - 1] = GridPoint(i, j)
    return grid


## Field access

def _field_index(field, point):
    i, j = point
    if isinstance(field, np.ndarray):
        if field.ndim < 2:
            raise ValueError('Field must have at least two dimensions.')
        ni, nj = field.shape[0], field.shape[1]
    else:
        # Nested sequence: the length of the row that is indexed
        ni = len(field)
        nj = len(field[i - 1]) if 1 <= i <= ni else 0
    if not (1 <= i <= ni and 1 <= j <= nj):
        raise IndexError('Grid point (%i, %i) is outside the field of size (%i, %i).'
                         % (i, j, ni, nj))
    return i - 1, j - 1


def get_value(field, point):
    """ get_value(field, point)

    Get the value of the field at the given grid point. The field is a
    numpy array or a nested sequence. Points outside the field raise an
    IndexError.
    """
    i0, j0 = _field_index(field, point)
    if isinstance(field, np.ndarray):
        return field[i0, j0]
    else:
        return field[i0][j0]


def set_value(field, point, value):
    """ set_value(field, point, value)

    Set the value of the field at the given grid point.
    """
    i0, j0 = _field_index(field, point)
    if isinstance(field, np.ndarray):
        field[i0, j0] = value
    else:
        field[i0][j0] = value


## Gradient at a vertex

def estimate_vertex_gradient(field, point, bounds=None):
    """ estimate_vertex_gradient(field, point, bounds=None)

    Estimate the gradient of the field at a grid point using a centered
    finite-difference method with a spatial step of 1. On an axis where
    the point lies on the border of the grid (index 1 or the bound), the
    slope is 0.0.

    Parameters
    ----------
    field : array
        The field to estimate the gradient of.
    point : GridPoint
        The vertex at which to estimate the gradient.
    bounds : tuple (ni, nj), optional
        The bounds of the grid. Default is the shape of the field.

    Returns a tuple (slope_x, slope_y).
    """
    # Avoid circular import
    from ._cell import lerp

    point = point if isinstance(point, GridPoint) else GridPoint(point)
    ni, nj = grid_bounds(field if bounds is None else bounds)

    here = get_value(field, point)
    if point.i in (1, ni):
        sx = 0.0
    else:
        sx = (lerp(get_value(field, point.left), here, 0.5) -
              lerp(here, get_value(field, point.right), 0.5))
    if point.j in (1, nj):
        sy = 0.0
    else:
        sy = (lerp(get_value(field, point.bottom), here, 0.5) -
              lerp(here, get_value(field, point.top), 0.5))
    return sx, sy
