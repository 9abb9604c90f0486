# Test the Numba sampling functions against the scalar functions, which
# are tested in test_cell.py.

import numpy as np

import gridhelpers
from gridhelpers import Cell, interpolate_bilinear, estimate_gradient
from gridhelpers.testing import raises, run_tests_if_main


def get_samples(shape, n=100):
    xs = np.random.uniform(1, shape[0] - 0.001, n)
    ys = np.random.uniform(1, shape[1] - 0.001, n)
    return xs, ys


def test_sample_bilinear():

    np.random.seed(0)
    A = np.random.rand(20, 30)
    xs, ys = get_samples(A.shape)

    result = gridhelpers.sample_bilinear(A, (xs, ys))
    assert result.shape == xs.shape
    assert result.dtype == A.dtype
    expected = [interpolate_bilinear(A, (x, y)) for x, y in zip(xs, ys)]
    assert np.allclose(result, expected, rtol=0, atol=1e-12)

    # Shape of samples is preserved
    result = gridhelpers.sample_bilinear(A, (xs.reshape(10, 10), ys.reshape(10, 10)))
    assert result.shape == (10, 10)
    assert np.allclose(result.ravel(), expected, rtol=0, atol=1e-12)

    # Stacked array and lists are fine too
    result = gridhelpers.sample_bilinear(A, np.array([xs, ys]))
    assert np.allclose(result, expected, rtol=0, atol=1e-12)
    result = gridhelpers.sample_bilinear(A, [[2.0, 3.5], [4.0, 4.0]])
    assert result.tolist() == [A[1, 3], 0.5 * (A[2, 3] + A[3, 3])]

    # Float32 stays float32, integers become float64
    result = gridhelpers.sample_bilinear(A.astype(np.float32), (xs, ys))
    assert result.dtype == np.float32
    B = np.arange(12).reshape(3, 4)
    result = gridhelpers.sample_bilinear(B, ([1.5], [2.5]))
    assert result.dtype == np.float64
    assert result[0] == interpolate_bilinear(B.astype(np.float64), (1.5, 2.5))


def test_sample_gradient():

    np.random.seed(1)
    A = np.random.rand(20, 30)
    xs, ys = get_samples(A.shape)

    gx, gy = gridhelpers.sample_gradient(A, (xs, ys))
    assert gx.shape == gy.shape == xs.shape
    expected = [estimate_gradient(A, (x, y)) for x, y in zip(xs, ys)]
    assert np.allclose(gx, [g[0] for g in expected], rtol=0, atol=1e-12)
    assert np.allclose(gy, [g[1] for g in expected], rtol=0, atol=1e-12)


def test_sample_safe():

    np.random.seed(2)
    A = np.random.rand(20, 30)
    xs = np.array([20.0, 5.5, 20.0, 1.0])
    ys = np.array([4.5, 30.0, 30.0, 1.0])

    with raises(IndexError):
        gridhelpers.sample_bilinear(A, (xs, ys))
    with raises(IndexError):
        gridhelpers.sample_gradient(A, (xs, ys))

    result = gridhelpers.sample_bilinear(A, (xs, ys), safe=True)
    gx, gy = gridhelpers.sample_gradient(A, (xs, ys), safe=True)
    for k, position in enumerate(zip(xs, ys)):
        cell = Cell(position, A.shape)
        assert abs(result[k] - interpolate_bilinear(A, position, cell)) < 1e-12
        g = estimate_gradient(A, position, cell)
        assert abs(gx[k] - g[0]) < 1e-12
        assert abs(gy[k] - g[1]) < 1e-12

    # Corners of the field give the corner values
    assert abs(result[2] - A[19, 29]) < 1e-12
    assert abs(result[3] - A[0, 0]) < 1e-12


def test_sample_out_of_range():

    A = np.zeros((10, 10))
    for x, y in [(0.5, 2.0), (2.0, 0.5), (10.5, 2.0), (2.0, 10.0), (-3.0, -3.0)]:
        with raises(IndexError):
            gridhelpers.sample_bilinear(A, ([x], [y]))
        # Safe mode only moves cells down, not up
        if x < 1 or y < 1:
            with raises(IndexError):
                gridhelpers.sample_bilinear(A, ([x], [y]), safe=True)


def test_sample_wrong_args():

    A = np.zeros((10, 10))
    xs = np.array([2.0, 3.0])

    with raises(ValueError):
        gridhelpers.sample_bilinear(np.zeros((10, )), (xs, xs))
    with raises(ValueError):
        gridhelpers.sample_bilinear(np.zeros((10, 10, 3)), (xs, xs))
    with raises(ValueError):
        gridhelpers.sample_bilinear(A, (xs, xs, xs))
    with raises(ValueError):
        gridhelpers.sample_bilinear(A, xs)
    with raises(ValueError):
        gridhelpers.sample_bilinear(A, (xs, xs[:1]))
    with raises(ValueError):
        gridhelpers.sample_gradient(A, (xs, np.array([2.0, np.nan])))


run_tests_if_main()
