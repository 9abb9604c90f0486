# flake8: noqa
""" Gridhelpers - grid points, cells and bilinear interpolation

Helpers to sample a field that is defined on a regular 2D grid at
arbitrary (floating point) positions. Grid indices are 1-based: the grid
point (i, j) corresponds to the element [i-1, j-1] of a numpy array.
"""

__version__ = '0.1.0'


# Check compat
import sys
if sys.version_info < (3, 6):
    raise RuntimeError('Gridhelpers requires at least Python 3.6')

# Imports

from ._gridpoint import (GridPoint, nearest,
                         neighbor, neighbors,
                         Neighborhood, FourNeighbors, EightNeighbors,
                         is_inside_grid, is_outside_grid, materialize_grid,
                         get_value, set_value, estimate_vertex_gradient)

from ._cell import (Cell, lerp, bilinear_weights,
                    interpolate_bilinear, estimate_gradient)

from ._sample import sample_bilinear, sample_gradient

# Clean up
del sys
