"""
.. This module acts as the top-level API documentation.

.. module: measurement

Unit-of-measure conversion driven by a table of per-unit factors.

.. autosummary::
    :toctree: generated/

    types
    units

The most commonly used names are available directly from this package:

>>> from measurement import Measurement, Unit
>>> length = Measurement('Distance').convert(2)
>>> length.from_(Unit.Distance.KILOMETRES).to(Unit.Distance.METRES).value
2000.0
"""

__version__ = "0.1.0"

import sys

from .units import (Category, ConversionWarning, Converted, Converter,
                    FAILURE, Failure, Measurement, PartialConversion,
                    STD_UNITS, TableError, Unit, UnitDef, UnitTable,
                    convert, get_unit_options, set_unit_options,
                    start_conversion)

# ======================================================================

assert sys.version_info >= (3, 12)
