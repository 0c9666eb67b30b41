"""Provide utility functions used by the tests of this package.

"""

from . import testing
