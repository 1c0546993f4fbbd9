from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

import numpy as np

from measurement.types import RealScalar


# ======================================================================

class TableError(ValueError):
    """
    This exception is raised when a unit table is found to be malformed
    during construction.  The category involved is available as
    `category` (``None`` if the problem is not specific to one).
    """

    def __init__(self, *args, category: str = None):
        super().__init__(*args)
        self.category = category


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class UnitDef:
    """
    Definition of a single unit within a category.

    A unit is related to the base unit of its category by a single
    multiplier: ``value_in_base = value_in_key * factor``.  The base unit
    itself is marked by `base` = ``None`` and has an implicit factor of
    one.

    Parameters
    ----------
    key : str
        Case-sensitive unit identifier, unique within its category.
    base : str or None, default = None
        Key of the base unit of the category, or ``None`` if this unit is
        the base unit.
    factor : RealScalar, default = 1
        Multiplier converting a value in this unit to the base unit.
    name : Mapping[str, str], optional
        Display names by locale (e.g. ``{'en': 'Meter', 'en_GB':
        'Metre'}``).
    plural : Mapping[str, str], optional
        Plural display names by locale.
    """
    key: str
    base: Optional[str] = None
    factor: RealScalar = 1
    name: Mapping[str, str] = field(default_factory=dict, compare=False,
                                    hash=False)
    plural: Mapping[str, str] = field(default_factory=dict, compare=False,
                                      hash=False)

    def __post_init__(self):
        # Frozen, so the name mappings are made read-only as well.
        object.__setattr__(self, 'name', MappingProxyType(dict(self.name)))
        object.__setattr__(self, 'plural',
                           MappingProxyType(dict(self.plural)))

    @property
    def is_base(self) -> bool:
        """Returns ``True`` if this is the base unit of its category."""
        return self.base is None


# ----------------------------------------------------------------------

class UnitTable(Mapping):
    """
    Read-only table of unit definitions, arranged as ``category -> unit
    key -> UnitDef``.

    Examples
    --------
    >>> tbl = UnitTable({'Time': {'s': UnitDef('s'),
    ...                           'min': UnitDef('min', 's', 60)}})
    >>> tbl.base_unit('Time')
    's'
    >>> tbl['Time']['min'].factor
    60

    A table without a base unit (or with more than one) is rejected:

    >>> UnitTable({'Time': {'min': UnitDef('min', 's', 60)}})
    ... # doctest: +ELLIPSIS, +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    TableError: Category 'Time' has no base unit.
    """

    def __init__(self, definitions: Mapping[str, Mapping[str, UnitDef]], *,
                 validate: bool = True):
        """
        Parameters
        ----------
        definitions : Mapping[str, Mapping[str, UnitDef]]
            Unit definitions for each category.  These are copied, so
            later changes to `definitions` do not affect the table.
        validate : bool, default = True
            If `True`, check the table is well formed (see ``validate()``)
            and raise `TableError` if not.  Setting `False` accepts
            malformed tables as given; conversions using them may then
            give ``FAILURE``.
        """
        self._defs = {cat: MappingProxyType(dict(units))
                      for cat, units in definitions.items()}
        if validate:
            self.validate()

    def __getitem__(self, category: str) -> Mapping[str, UnitDef]:
        return self._defs[category]

    def __iter__(self) -> Iterator[str]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    def __repr__(self):
        cats = ', '.join(f"{cat}: [{', '.join(units)}]"
                         for cat, units in self._defs.items())
        return f"{self.__class__.__name__}({cats})"

    # -- Public Methods ------------------------------------------------

    def base_unit(self, category: str) -> Optional[str]:
        """
        Returns the key of the base unit for `category`, or ``None`` if
        the category has no base unit (only possible for unvalidated
        tables).  If more than one base unit exists the first found is
        returned.

        Raises
        ------
        KeyError
            If `category` is not in the table.
        """
        for key, udef in self._defs[category].items():
            if udef.is_base:
                return key
        return None

    def lookup(self, category: str, key: str) -> Optional[UnitDef]:
        """
        Returns the ``UnitDef`` for `key` in `category`, or ``None`` if
        either the category or the unit is unknown.
        """
        try:
            return self._defs[category].get(key)
        except (KeyError, TypeError):
            return None

    def unit_name(self, category: str, key: str, locale: str = 'en',
                  plural: bool = False) -> str:
        """
        Returns a display name for a unit.

        The name is looked up for `locale` first, then for the language
        alone (e.g. ``'en_GB'`` → ``'en'``).  If a plural is requested but
        not given, the singular name is used.  Where no name exists, the
        unit key itself is returned.

        Examples
        --------
        >>> from measurement.units import STD_UNITS
        >>> STD_UNITS.unit_name('Distance', 'km', 'en_GB', plural=True)
        'Kilometres'
        >>> STD_UNITS.unit_name('Pressure', 'hPa', 'en_GB', plural=True)
        'Hectopascals'
        >>> STD_UNITS.unit_name('Speed', 'kn')
        'kn'

        Raises
        ------
        KeyError
            If `category` or `key` is not in the table.
        """
        udef = self._defs[category][key]
        candidates = [locale]
        if '_' in locale:
            candidates.append(locale.split('_', 1)[0])

        if plural:
            for loc in candidates:
                if loc in udef.plural:
                    return udef.plural[loc]

        for loc in candidates:
            if loc in udef.name:
                return udef.name[loc]

        return key

    def units(self, category: str) -> tuple[str, ...]:
        """Returns the unit keys in `category`, in definition order."""
        return tuple(self._defs[category])

    def validate(self):
        """
        Check that the table is well formed.  For each category:

            - Exactly one unit is the base unit (`base` = ``None``).
            - Every other unit refers directly to that base unit, i.e.
              there are no chains of intermediate units.
            - Every non-base factor is a positive finite number.
            - Each ``UnitDef.key`` matches the key it is stored under.

        Raises
        ------
        TableError
            On the first problem found.
        """
        for cat, units in self._defs.items():
            for key, udef in units.items():
                if udef.key != key:
                    raise TableError(f"Unit '{key}' in category '{cat}' is "
                                     f"defined with key '{udef.key}'.",
                                     category=cat)

            bases = [key for key, udef in units.items() if udef.is_base]
            if not bases:
                raise TableError(f"Category '{cat}' has no base unit.",
                                 category=cat)
            if len(bases) > 1:
                raise TableError(f"Category '{cat}' has multiple base "
                                 f"units: {', '.join(bases)}.", category=cat)
            base = bases[0]

            for key, udef in units.items():
                if udef.is_base:
                    continue

                if udef.base != base:
                    raise TableError(f"Unit '{key}' in category '{cat}' "
                                     f"refers to '{udef.base}', not the base "
                                     f"unit '{base}'.", category=cat)

                factor = udef.factor
                if (isinstance(factor, bool) or
                        not isinstance(factor, (int, float, np.number)) or
                        not np.isfinite(factor) or factor <= 0):
                    raise TableError(f"Unit '{key}' in category '{cat}' "
                                     f"requires a positive finite factor, "
                                     f"got {factor!r}.", category=cat)
