from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

import numpy as np

from measurement.types import RealArray
from ._conv import Converter, Failure, FAILURE


# ======================================================================

@dataclass(frozen=True)
class Converted:
    """
    Final result of a fluent conversion.

    Parameters
    ----------
    value : RealArray or FAILURE
        The converted value, or ``FAILURE``.
    reason : Failure or None
        Why the conversion failed, or ``None`` if it succeeded.

    Notes
    -----
    Two results are equal when their reasons match and their values are
    equal elementwise, so results holding arrays can also be compared.
    """
    value: object
    reason: Optional[Failure] = None

    def __eq__(self, rhs):
        if not isinstance(rhs, Converted):
            return NotImplemented
        if self.reason is not rhs.reason:
            return False
        if self.value is FAILURE or rhs.value is FAILURE:
            return self.value is rhs.value
        return bool(np.array_equal(self.value, rhs.value))

    def __float__(self) -> float:
        """
        Returns float(self.value).

        Raises
        ------
        ValueError
            If the conversion failed.
        """
        if not self.ok:
            why = self.reason.value if self.reason is not None else 'FAILURE'
            raise ValueError(f"Conversion failed: {why}.")
        return float(self.value)

    @property
    def ok(self) -> bool:
        """``True`` if the conversion succeeded."""
        return self.reason is None and self.value is not FAILURE


@dataclass(frozen=True)
class PartialConversion:
    """
    A conversion awaiting one or both of its units.  Units are given by
    ``from_()`` and ``to()`` in either order.  Each call gives a new
    object; as soon as both units are known the conversion is done and a
    ``Converted`` result is given instead.

    Examples
    --------
    >>> half_way = start_conversion('Distance', 1.5).to('m')
    >>> half_way.from_('km')
    Converted(value=1500.0, reason=None)

    Because each step gives a new object, a partial conversion can be
    completed more than once:

    >>> half_way.from_('y').ok
    True
    """
    category: str
    value: RealArray
    from_units: Optional[str] = None
    to_units: Optional[str] = None
    converter: Converter = field(default_factory=Converter, repr=False,
                                 compare=False)

    def from_(self, units: str) -> Union[PartialConversion, Converted]:
        """Set the units of the value being converted."""
        return replace(self, from_units=units or None)._complete()

    def to(self, units: str) -> Union[PartialConversion, Converted]:
        """Set the target units."""
        return replace(self, to_units=units or None)._complete()

    def _complete(self) -> Union[PartialConversion, Converted]:
        if self.from_units is None or self.to_units is None:
            return self

        result, reason = self.converter.resolve(
            self.category, self.from_units, self.to_units, self.value)
        return Converted(result, reason)


# ----------------------------------------------------------------------

class Measurement:
    """
    Entry point for fluent conversions within one category.

    Examples
    --------
    >>> speed = Measurement('Speed')
    >>> round(speed.convert(10).from_('mph').to('m/s').value, 4)
    4.4704
    >>> round(speed.convert(10).to('m/s').from_('mph').value, 4)
    4.4704

    Results can be matched by type:

    >>> match speed.convert(5).from_('mph').to('parsecs'):
    ...     case Converted(value, None):
    ...         print(value)
    ...     case Converted(_, reason):
    ...         print(f"Failed: {reason.value}")
    Failed: unknown unit
    """

    def __init__(self, category: str, converter: Converter = None):
        """
        Parameters
        ----------
        category : str
            Category used for all conversions, e.g. ``'Speed'``.
        converter : Converter, optional
            Converter to use.  If omitted, one using the standard table
            is created.
        """
        self.category = category
        self.converter = converter if converter is not None else Converter()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.category!r})"

    def convert(self, value: RealArray) -> PartialConversion:
        """Start converting `value`.  Units are then given by ``from_()``
        and ``to()``."""
        return PartialConversion(self.category, value,
                                 converter=self.converter)


# -- Public Functions --------------------------------------------------

def start_conversion(category: str, value: RealArray, *,
                     converter: Converter = None) -> PartialConversion:
    """
    Start a fluent conversion of `value` within `category`, e.g.
    ``start_conversion('Speed', 10).from_('mph').to('kn')``.  Equivalent
    to ``Measurement(category, converter).convert(value)``.
    """
    return Measurement(category, converter).convert(value)
