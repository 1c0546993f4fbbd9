from ._table import UnitDef, UnitTable


# == Unit Keys =========================================================

class Category:
    """Names of the categories in the standard table."""
    SPEED = 'Speed'
    DISTANCE = 'Distance'
    PRESSURE = 'Pressure'


class Unit:
    """
    Unit keys of the standard table, grouped by category.  These are
    plain strings and can be used interchangeably with the keys
    themselves, e.g. ``Unit.Speed.KNOT == 'kn'``.
    """

    class Speed:
        MILES_PER_HOUR = 'mph'
        KILOMETRE_PER_HOUR = 'km/h'
        METRE_PER_SECOND = 'm/s'
        KNOT = 'kn'

    class Distance:
        KILOMETRES = 'km'
        MILES = 'M'
        METRES = 'm'
        YARDS = 'y'

    class Pressure:
        HECTOPASCAL = 'hPa'
        PASCAL = 'Pa'
        BAR = 'bar'


# == Standard Unit Definitions =========================================

_DEFINITIONS: dict[str, dict[str, UnitDef]] = {}


def _add_base_unit(category: str, key: str, **names):
    _DEFINITIONS.setdefault(category, {})[key] = UnitDef(key, None, 1,
                                                         **names)


def _add_unit(category: str, key: str, base: str, factor, **names):
    _DEFINITIONS.setdefault(category, {})[key] = UnitDef(key, base, factor,
                                                         **names)


# -- Speed -------------------------------------------------------------

_spd = Unit.Speed
_add_base_unit(Category.SPEED, _spd.KILOMETRE_PER_HOUR)
_add_unit(Category.SPEED, _spd.MILES_PER_HOUR, _spd.KILOMETRE_PER_HOUR,
          1.609344)  # International mile.
_add_unit(Category.SPEED, _spd.METRE_PER_SECOND, _spd.KILOMETRE_PER_HOUR,
          3.6)
_add_unit(Category.SPEED, _spd.KNOT, _spd.KILOMETRE_PER_HOUR,
          1.852)  # International NM.

# -- Distance ----------------------------------------------------------

_dst = Unit.Distance
_add_base_unit(Category.DISTANCE, _dst.METRES,
               name={'de': 'Meter', 'en': 'Meter', 'en_GB': 'Metre'},
               plural={'en': 'Meters', 'en_GB': 'Metres'})
_add_unit(Category.DISTANCE, _dst.KILOMETRES, _dst.METRES, 1000,
          name={'de': 'Kilometer', 'en': 'Kilometer', 'en_GB': 'Kilometre'},
          plural={'en': 'Kilometers', 'en_GB': 'Kilometres'})
_add_unit(Category.DISTANCE, _dst.MILES, _dst.METRES, 1609.344,
          name={'de': 'Meile', 'en': 'Mile'},
          plural={'de': 'Meilen', 'en': 'Miles'})
_add_unit(Category.DISTANCE, _dst.YARDS, _dst.METRES, 0.9144,
          name={'de': 'Yard', 'en': 'Yard'},
          plural={'en': 'Yards'})
# Mile and yard are the international definitions (1959).

# -- Pressure ----------------------------------------------------------

_prs = Unit.Pressure
_add_base_unit(Category.PRESSURE, _prs.PASCAL,
               name={'de': 'Pascal', 'en': 'Pascal', 'en_GB': 'Pascal'},
               plural={'en': 'Pascals'})
_add_unit(Category.PRESSURE, _prs.HECTOPASCAL, _prs.PASCAL, 100,
          name={'de': 'Hektopascal', 'en': 'Hectopascal',
                'en_GB': 'Hectopascal'},
          plural={'en': 'Hectopascals'})
_add_unit(Category.PRESSURE, _prs.BAR, _prs.PASCAL, 1000000,
          name={'de': 'Bar', 'en': 'Bar', 'en_GB': 'Bar'},
          plural={'en': 'Bars'})
# Note: 'bar' is defined here as 1e6 Pa (1 bar -> 10000 hPa), which is
# ten times the SI bar of 1e5 Pa.

# ======================================================================

STD_UNITS = UnitTable(_DEFINITIONS)
"""Standard unit table, validated on import."""

del _spd, _dst, _prs
