"""
Units (:mod:`measurement.units`)
================================

.. currentmodule:: measurement.units

Conversion of values between units of the same category.

Examples
--------

Each unit in a category is defined relative to the category's base unit
by a single factor.  The standard table ``STD_UNITS`` contains speed,
distance and pressure units.  The ``convert`` function converts plain
numeric values directly:

>>> convert('Distance', 'km', 'm', 1.5)
1500.0

Where neither unit is the base of the other, the conversion is done via
the base unit.  Here `mph` is converted to `km/h` and then to `m/s`:

>>> round(convert('Speed', 'mph', 'm/s', 10), 4)
4.4704

Unit keys are also available as named constants:

>>> convert(Category.PRESSURE, Unit.Pressure.BAR, Unit.Pressure.HECTOPASCAL,
...         1)
10000.0

A fluent style is available via ``Measurement``, with the units given in
either order.  The result is a ``Converted`` object holding the value:

>>> distance = Measurement(Category.DISTANCE)
>>> distance.convert(3.5).from_('km').to('m').value
3500.0
>>> distance.convert(3.5).to('m').from_('km').value
3500.0

Conversions do not raise exceptions when they cannot be done.  Instead
``FAILURE`` is given, which is falsy:

>>> convert('Speed', 'mph', 'furlong/fortnight', 5)
FAILURE
>>> convert('Volume', 'l', 'ml', 5)
FAILURE

Arrays are converted elementwise:

>>> import numpy as np
>>> convert('Distance', 'km', 'm', np.array([1, 2.5]))
array([1000., 2500.])
"""

from ._builder import (Converted, Measurement, PartialConversion,
                       start_conversion)
from ._conv import (ConversionWarning, Converter, Failure, FAILURE,
                    convert)
from ._defs import Category, STD_UNITS, Unit
from ._opts import UnitOptions, get_unit_options, set_unit_options
from ._table import TableError, UnitDef, UnitTable
