"""
Numeric type shorthands and a sentinel factory used throughout the package.
"""
from typing import Union

import numpy as np

RealScalar = Union[int, float]
"""A `RealScalar` is a shorthand defined for type checking purposes as
``Union[int, float]`` and represents a plain numeric value that has no
units attached."""

RealArray = Union[RealScalar, np.ndarray]
"""A `RealArray` is a shorthand defined for type checking purposes as
``Union[RealScalar, np.ndarray]``.  Conversions act elementwise on arrays,
so anywhere a `RealScalar` is accepted a NumPy array may be used instead."""


# =============================================================================

def is_real_array(x) -> bool:
    """
    Returns ``True`` if `x` is one of the ``RealArray`` types.  Booleans are
    rejected even though they are technically ``int``.
    """
    if isinstance(x, bool):
        return False
    if isinstance(x, np.ndarray):
        return np.issubdtype(x.dtype, np.number)
    return isinstance(x, (int, float, np.number))


def make_sentinel(name='_MISSING', var_name=None):
    """
    Creates and returns a new falsy sentinel **instance**, used where a
    distinct marker value is needed (e.g. ``FAILURE``).  Adapted from
    ``boltons.typeutils``.

    Examples
    --------
    >>> make_sentinel(var_name='_MISSING')
    _MISSING
    >>> bool(make_sentinel('FAILED'))
    False

    Parameters
    ----------
    name : str
        Name of the Sentinel.
    var_name : str (optional)
        If given, used as the `repr` of the sentinel.
    """

    class Sentinel(object):
        def __init__(self):
            self.name = name
            self.var_name = var_name

        def __call__(self, *args, **kwargs):
            # Added __call__ in case an attempt is made.
            raise TypeError(f"Cannot call '{self.__repr__()}'.")

        def __repr__(self):
            if self.var_name:
                return self.var_name
            return '%s(%r)' % (self.__class__.__name__, self.name)

        def __bool__(self):
            return False

    return Sentinel()
