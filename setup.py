""" Gridhelpers setup script.

"""

import os
from setuptools import setup


name = 'gridhelpers'
description = 'Grid points, cells and bilinear interpolation on regular 2D grids'

# Get version and docstring
__version__ = None
__doc__ = ''
docStatus = 0 # Not started, in progress, done
initFile = os.path.join(os.path.dirname(__file__), name, '__init__.py')
for line in open(initFile).readlines():
    if (line.startswith('__version__')):
        exec(line.strip())
    elif line.startswith('"""'):
        if docStatus == 0:
            docStatus = 1
            line = line.lstrip('"')
        elif docStatus == 1:
            docStatus = 2
    if docStatus == 1:
        __doc__ += line


setup(
    name = name,
    version = __version__,
    license = '(new) BSD',
    
    keywords = "grid interpolation bilinear gradient",
    description = description,
    long_description = __doc__,
    
    platforms = 'any',
    provides = ['gridhelpers'],
    python_requires = '>=3.6',
    install_requires = ['numpy', 'numba'],
    extras_require = {'test': ['pytest']},
    
    packages = ['gridhelpers'],
    package_dir = {'gridhelpers': 'gridhelpers'},
    
    zip_safe = False,
    
    classifiers=[
          'Development Status :: 3 - Alpha',
          'Intended Audience :: Science/Research',
          'License :: OSI Approved :: BSD License',
          'Operating System :: MacOS :: MacOS X',
          'Operating System :: Microsoft :: Windows',
          'Operating System :: POSIX',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          ],
    )
