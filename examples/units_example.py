#!/usr/bin/env python3

# Examples of unit conversion.

from measurement import (Category, Converted, FAILURE, Measurement, STD_UNITS,
                         Unit, convert)


# ----------------------------------------------------------------------------

def main():
    spd = Unit.Speed
    wind = 25  # kn
    wind_kmh = convert(Category.SPEED, spd.KNOT, spd.KILOMETRE_PER_HOUR, wind)
    wind_ms = convert(Category.SPEED, spd.KNOT, spd.METRE_PER_SECOND, wind)
    print(f"Wind speed = {wind} {spd.KNOT} "
          f"[{wind_kmh:.5g} {spd.KILOMETRE_PER_HOUR}] "
          f"[{wind_ms:.5g} {spd.METRE_PER_SECOND}]")

    # Units can be given in either order.
    distance = Measurement(Category.DISTANCE)
    runway = distance.convert(2400).from_(Unit.Distance.METRES)
    for target in (Unit.Distance.KILOMETRES, Unit.Distance.YARDS,
                   Unit.Distance.MILES):
        res = runway.to(target)
        name = STD_UNITS.unit_name(Category.DISTANCE, target, 'en_GB',
                                   plural=True)
        print(f"Runway length = {res.value:.5g} {name}")

    qnh = Measurement(Category.PRESSURE).convert(1013.25).to(
        Unit.Pressure.PASCAL).from_(Unit.Pressure.HECTOPASCAL)
    print(f"QNH = {qnh.value:.6g} Pa")

    # Failed conversions give a result that can be checked.
    match distance.convert(1).from_('km').to('furlong'):
        case Converted(value, None):
            print(f"Converted: {value}")
        case Converted(_, reason):
            print(f"Conversion failed: {reason.value}")

    if convert('Volume', 'l', 'ml', 1) is FAILURE:
        print("No volume units are defined.")


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
