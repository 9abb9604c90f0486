""" Bilinear sampling of many positions at once, implemented with Numba
to make it fast.

These functions give the same results as calling interpolate_bilinear()
and estimate_gradient() for each position, but avoid creating a Cell
object per sample.
"""

import numpy as np
import numba


@numba.jit(nopython=True, nogil=True)
def floor(i):
    if i >= 0 or int(i) == i:
        return int(i)
    else:
        return int(i) - 1


def _check_args(field, samples):
    """ Check field and samples, return them as numpy arrays.
    """

    # Check field
    field = np.asarray(field)
    if field.ndim != 2:
        raise ValueError('field must be a 2D array.')
    if field.dtype.kind not in 'fc':
        field = field.astype(np.float64)

    # Check samples
    if isinstance(samples, list):
        samples = tuple(samples)
    elif isinstance(samples, np.ndarray) and samples.ndim > 1 and samples.shape[0] == 2:
        samples = samples[0], samples[1]
    if not isinstance(samples, tuple) or len(samples) != 2:
        raise ValueError('samples must be a tuple of two arrays (xs, ys).')
    samples = tuple(np.asarray(s, dtype=np.float64) for s in samples)
    if samples[0].shape != samples[1].shape:
        raise ValueError('sample arrays must all have the same shape.')
    for s in samples:
        if not np.all(np.isfinite(s)):
            raise ValueError('sample positions must be finite.')

    return field, samples


def _raise_if_out_of_range(n_out, field):
    if n_out:
        raise IndexError('%i sample(s) lie in a cell outside the field of shape %r.'
                         % (n_out, field.shape))


def sample_bilinear(field, samples, safe=False):
    """ sample_bilinear(field, samples, safe=False)

    Bilinear interpolation of the field at many positions.

    Parameters
    ----------
    field : array
        2D data to interpolate. Integer data is sampled as float64.
    samples : tuple with numpy arrays
        The arrays (xs, ys) specify the (1-based) sample positions. They
        can be of any shape, as long as both have the same shape.
    safe : bool
        If True, positions on (or beyond) the last grid index use the cell
        that ends at that index, as Cell(position, field.shape) does.
        Default False.

    Returns
    -------
    result : array
        Of the same shape as the sample arrays, and the dtype of the field.
        If any sample needs values outside the field, an IndexError is raised.
    """
    field, samples = _check_args(field, samples)
    result = np.empty(samples[0].shape, field.dtype)
    n_out = bilinear2(field, result.ravel(), samples[0].ravel(), samples[1].ravel(), safe)
    _raise_if_out_of_range(n_out, field)
    return result


def sample_gradient(field, samples, safe=False):
    """ sample_gradient(field, samples, safe=False)

    Estimate the gradient of the field at many positions, using the
    gradient of the bilinear surface in each cell. See sample_bilinear()
    for the arguments.

    Returns a tuple (gx, gy) of arrays with the shape of the sample arrays.
    """
    field, samples = _check_args(field, samples)
    gx = np.empty(samples[0].shape, field.dtype)
    gy = np.empty(samples[0].shape, field.dtype)
    n_out = gradient2(field, gx.ravel(), gy.ravel(),
                      samples[0].ravel(), samples[1].ravel(), safe)
    _raise_if_out_of_range(n_out, field)
    return gx, gy


@numba.jit(nopython=True, nogil=True)
def bilinear2(data_, result_, samplesx_, samplesy_, safe):

    Ni = samplesx_.size
    Nx = data_.shape[0]
    Ny = data_.shape[1]
    n_out = 0

    # Iterate over all samples
    for i in range(0, Ni):

        x = samplesx_[i]
        y = samplesy_[i]

        # Get integer cell corner (1-based)
        cx = x; cy = y
        if safe:
            if cx >= Nx: cx -= 1.0
            if cy >= Ny: cy -= 1.0
        ix = floor(cx); tx = x - ix
        iy = floor(cy); ty = y - iy

        if ix < 1 or ix >= Nx or iy < 1 or iy >= Ny:
            # Out of range
            n_out += 1
            continue

        # Nested linear interpolation, x first
        nx0 = data_[ix-1, iy-1] * (1.0 - tx) + data_[ix, iy-1] * tx
        nx1 = data_[ix-1, iy  ] * (1.0 - tx) + data_[ix, iy  ] * tx
        result_[i] = nx0 * (1.0 - ty) + nx1 * ty

    return n_out


@numba.jit(nopython=True, nogil=True)
def gradient2(data_, resultx_, resulty_, samplesx_, samplesy_, safe):

    Ni = samplesx_.size
    Nx = data_.shape[0]
    Ny = data_.shape[1]
    n_out = 0

    for i in range(0, Ni):

        x = samplesx_[i]
        y = samplesy_[i]

        cx = x; cy = y
        if safe:
            if cx >= Nx: cx -= 1.0
            if cy >= Ny: cy -= 1.0
        ix = floor(cx); tx = x - ix
        iy = floor(cy); ty = y - iy

        if ix < 1 or ix >= Nx or iy < 1 or iy >= Ny:
            n_out += 1
            continue

        bl = data_[ix-1, iy-1]
        br = data_[ix,   iy-1]
        tl = data_[ix-1, iy  ]
        tr = data_[ix,   iy  ]
        resultx_[i] = (br - bl) * (1.0 - tx) + (tr - tl) * tx
        resulty_[i] = (tr - br) * (1.0 - ty) + (tl - bl) * ty

    return n_out
