from __future__ import annotations

import logging
import warnings
from enum import Enum
from typing import Optional

import numpy as np

from measurement.types import RealArray, is_real_array, make_sentinel
from ._defs import STD_UNITS
from ._opts import get_unit_options
from ._table import UnitTable

logger = logging.getLogger(__name__)

FAILURE = make_sentinel('FAILURE', var_name='FAILURE')
"""Result given by any conversion that could not be completed.  It is
falsy, so results can be checked with ``if result is FAILURE`` or simply
``if not result`` where a zero result is not expected."""


# ======================================================================

class ConversionWarning(UserWarning):
    """Warning category used for conversion diagnostics."""


class Failure(Enum):
    """Reason a conversion gave ``FAILURE``."""
    UNKNOWN_CATEGORY = 'unknown category'
    UNKNOWN_UNIT = 'unknown unit'
    UNRESOLVABLE = 'unresolvable conversion'


# ----------------------------------------------------------------------

class Converter:
    """
    Converts values between units of the same category by consulting a
    ``UnitTable``.

    Three cases are possible depending on how the units relate:

        - `Direct-to-base`: The output unit is the base of the input
          unit.  The value is multiplied by the input unit factor.
        - `Base-to-direct`: The input unit is the base of the output
          unit.  The value is divided by the output unit factor.
        - `Two-hop`: Neither unit is the base of the other.  The value is
          first converted to the base unit (the `pivot`) and then from
          the pivot to the output unit.

    Converting a unit to itself gives the value unchanged.  Any other
    conversion that cannot be completed gives ``FAILURE`` rather than
    raising an exception.

    Examples
    --------
    >>> conv = Converter()
    >>> conv.convert('Distance', 'km', 'm', 1.5)
    1500.0
    >>> round(conv.convert('Speed', 'mph', 'm/s', 10), 4)
    4.4704
    >>> conv.convert('Speed', 'mph', 'furlong/fortnight', 5)
    FAILURE
    """

    def __init__(self, table: UnitTable = None):
        """
        Parameters
        ----------
        table : UnitTable, optional
            Unit definitions to use.  If omitted the standard table
            ``STD_UNITS`` is used.
        """
        self.table = table if table is not None else STD_UNITS

    def __repr__(self):
        return f"{self.__class__.__name__}({self.table!r})"

    def convert(self, category: str, from_units: str, to_units: str,
                value: RealArray):
        """
        Convert `value` in `from_units` to `to_units`, where both units
        belong to `category`.

        Values are converted to ``float`` (or a ``float`` array) before
        any arithmetic, so the result is always floating point.

        Returns
        -------
        result : RealArray or FAILURE
            Converted value, or ``FAILURE`` if the category or either
            unit is unknown, or no conversion path exists in the table.

        Raises
        ------
        TypeError
            If `value` is not numeric.
        OverflowError
            If `value` is an integer too large to represent as a float.
        """
        result, _ = self.resolve(category, from_units, to_units, value)
        return result

    def resolve(self, category: str, from_units: str, to_units: str,
                value: RealArray) -> tuple[object, Optional[Failure]]:
        """
        As for ``convert()``, but also returns the reason for any failure.

        Returns
        -------
        result, reason : (RealArray or FAILURE, Failure or None)
            `reason` is ``None`` when the conversion succeeded.
        """
        if not is_real_array(value):
            raise TypeError(f"Expected a numeric value to convert, got "
                            f"{value!r}.")

        if isinstance(value, np.ndarray):
            value = value.astype(float)
        else:
            value = float(value)

        return self._resolve(category, from_units, to_units, value, 0)

    # -- Private Methods -----------------------------------------------

    def _resolve(self, category, from_units, to_units, value,
                 depth: int) -> tuple[object, Optional[Failure]]:
        try:
            units = self.table[category]
        except (KeyError, TypeError):
            return _fail(Failure.UNKNOWN_CATEGORY,
                         f"Unknown category '{category}'.")

        in_def = self.table.lookup(category, from_units)
        out_def = self.table.lookup(category, to_units)
        if in_def is None or out_def is None:
            missing = from_units if in_def is None else to_units
            return _fail(Failure.UNKNOWN_UNIT,
                         f"Unknown unit '{missing}' in category "
                         f"'{category}' (known: {', '.join(units)}).")

        if from_units == to_units:
            return value, None

        # Direct-to-base.
        if in_def.base == to_units:
            return value * in_def.factor, None

        # Base-to-direct.
        if out_def.base == from_units:
            return value / out_def.factor, None

        # Two-hop.  Neither side is the base of the other, so go via the
        # base unit of whichever side has one.
        pivot = in_def.base if in_def.base is not None else out_def.base
        if pivot is None:
            return _fail(Failure.UNRESOLVABLE,
                         f"No base unit connects '{from_units}' -> "
                         f"'{to_units}' in category '{category}'.")

        max_depth = get_unit_options().max_conversion_depth
        if depth + 1 > max_depth:
            return _fail(Failure.UNRESOLVABLE,
                         f"Converting '{from_units}' -> '{to_units}' in "
                         f"category '{category}' exceeded "
                         f"{max_depth} steps; check the table for "
                         f"circular base units.", always_warn=True)

        base_value, reason = self._resolve(category, from_units, pivot,
                                           value, depth + 1)
        if reason is not None:
            return base_value, reason

        return self._resolve(category, pivot, to_units, base_value,
                             depth + 1)


# -- Public Functions --------------------------------------------------

def convert(category: str, from_units: str, to_units: str,
            value: RealArray, *, table: UnitTable = None):
    """
    Convert `value` currently in `from_units` to `to_units` within
    `category`.  This is a shorthand for ``Converter(table).convert()``.

    Examples
    --------
    >>> convert('Pressure', 'bar', 'hPa', 1)
    10000.0

    Parameters
    ----------
    category : str
        Category both units belong to, e.g. ``'Speed'``.
    from_units : str
        Units of `value`.
    to_units : str
        Target units.
    value : scalar or array-like
        Value for conversion.
    table : UnitTable, optional
        Unit definitions to use (default ``STD_UNITS``).

    Returns
    -------
    result : scalar, array-like or FAILURE
        Converted value, or ``FAILURE`` if no conversion was possible.
    """
    return Converter(table).convert(category, from_units, to_units, value)


# ----------------------------------------------------------------------

def _fail(reason: Failure, msg: str, always_warn: bool = False):
    """Record a failed conversion and return the failure result."""
    logger.debug("%s: %s", reason.value, msg)
    if always_warn or get_unit_options().warn_on_failure:
        warnings.warn(msg, ConversionWarning)
    return FAILURE, reason
