from __future__ import annotations

from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class UnitOptions:
    """
    Dataclass that holds option flags for handling conversions.  See
    `get_unit_options` and `set_unit_options` for full details.
    """
    max_conversion_depth: int
    warn_on_failure: bool

    def __post_init__(self):
        """Check certain values"""
        if self.max_conversion_depth < 2:
            raise ValueError("Require 'max_conversion_depth' >= 2.")


# Create single instance and set defaults.
_unit_options = UnitOptions(
    max_conversion_depth=4,
    warn_on_failure=False
)


# ----------------------------------------------------------------------

def get_unit_options() -> UnitOptions:
    """
    Returns
    -------
    unit_options : UnitOptions
        Returns a UnitOptions object containing the options.  For a
        full description of each option, see `set_unit_options`.
    """
    return replace(_unit_options)


# noinspection PyIncorrectDocstring
def set_unit_options(**kwargs):
    """
    Set the current unit options.

    Parameters
    ----------
    max_conversion_depth : int, default = 4
        Maximum number of nested conversion steps permitted when
        resolving a conversion through a base unit.  A well formed table
        never needs more than two.  Conversions that go deeper than this
        are abandoned and give ``FAILURE``, with a `ConversionWarning`.

    warn_on_failure : bool, default = False
        If `True`, issue a `ConversionWarning` every time a conversion
        gives ``FAILURE``, naming the condition that caused it.  By
        default only unresolvable conversions warn and the remaining
        cases are logged at DEBUG level.

    Raises
    ------
    ValueError
        If `max_conversion_depth` < 2.
    TypeError
        If an unknown option is given.

    See Also
    --------
    get_unit_options

    Examples
    --------
    >>> set_unit_options(warn_on_failure=True)
    >>> get_unit_options().warn_on_failure
    True
    >>> set_unit_options(warn_on_failure=False)
    """
    global _unit_options
    _unit_options = replace(_unit_options, **kwargs)
