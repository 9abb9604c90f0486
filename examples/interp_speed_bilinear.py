"""
Test speed of the scalar interpolation functions, with and without a
precomputed cell, versus the sample functions that do many positions at once.
"""

import time

import numpy as np
import gridhelpers
from gridhelpers import Cell

print('Test speed of scalar bilinear functions vs sample_bilinear')

A = np.random.rand(512, 512)
position = (6.3, 421.7)
cell = Cell(position)
n = 100000


def timeit(name, func, *args):
    t0 = time.time()
    for i in range(n):
        func(*args)
    t = time.time() - t0
    print('%s: %1.3f us' % (name.ljust(40), 1e6 * t / n))


timeit('interpolate_bilinear', gridhelpers.interpolate_bilinear, A, position)
timeit('interpolate_bilinear (given cell)', gridhelpers.interpolate_bilinear, A, position, cell)
timeit('estimate_gradient', gridhelpers.estimate_gradient, A, position)
timeit('estimate_gradient (given cell)', gridhelpers.estimate_gradient, A, position, cell)
timeit('bilinear_weights', gridhelpers.bilinear_weights, cell, position)

# Sample functions
xs = np.random.uniform(1, 511.9, n)
ys = np.random.uniform(1, 511.9, n)
#
# Jit warmup
gridhelpers.sample_bilinear(A, (xs[:9], ys[:9]))
gridhelpers.sample_gradient(A, (xs[:9], ys[:9]))
#
t0 = time.time()
gridhelpers.sample_bilinear(A, (xs, ys))
print('%s: %1.3f us' % ('sample_bilinear (per sample)'.ljust(40), 1e6 * (time.time() - t0) / n))
t0 = time.time()
gridhelpers.sample_gradient(A, (xs, ys))
print('%s: %1.3f us' % ('sample_gradient (per sample)'.ljust(40), 1e6 * (time.time() - t0) / n))
