""" Utilities for the test suite.
"""

import os
import sys
import inspect

import pytest

raises = pytest.raises


def run_tests_if_main(show_coverage=False):
    """ Run tests in a given file if it is run as a script.
    """
    local_vars = inspect.currentframe().f_back.f_locals
    if not local_vars.get('__name__', '') == '__main__':
        return
    # we are in a "__main__"
    fname = str(local_vars['__file__'])
    os.chdir(os.path.dirname(os.path.abspath(fname)))
    args = ['-v', '-x', '--color=yes', fname]
    sys.exit(pytest.main(args))
