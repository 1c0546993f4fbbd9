from unittest import TestCase


class TestMeasurement(TestCase):
    def test_either_order(self):
        from measurement.units import Measurement, Converted

        speed = Measurement('Speed')
        a = speed.convert(10).from_('mph').to('m/s')
        b = speed.convert(10).to('m/s').from_('mph')
        self.assertIsInstance(a, Converted)
        self.assertEqual(a, b)
        self.assertAlmostEqual(a.value, 4.4704)
        self.assertTrue(a.ok)
        self.assertIsNone(a.reason)
        self.assertAlmostEqual(float(a), 4.4704)

        for cat, u1, u2 in (('Distance', 'km', 'y'),
                            ('Pressure', 'hPa', 'bar'),
                            ('Speed', 'kn', 'km/h')):
            fwd = Measurement(cat).convert(2.5).from_(u1).to(u2)
            rev = Measurement(cat).convert(2.5).to(u2).from_(u1)
            self.assertEqual(fwd.value, rev.value)

    def test_partial(self):
        from measurement.units import (Converted, Measurement,
                                       PartialConversion)

        start = Measurement('Distance').convert(1.5)
        self.assertIsInstance(start, PartialConversion)
        self.assertEqual(start.category, 'Distance')
        self.assertEqual(start.value, 1.5)

        half = start.to('m')
        self.assertIsInstance(half, PartialConversion)
        self.assertEqual(half.to_units, 'm')
        self.assertIsNone(half.from_units)

        # Earlier steps are unchanged and can be reused.
        self.assertIsNone(start.to_units)
        self.assertEqual(half.from_('km'), Converted(1500.0))
        self.assertAlmostEqual(half.from_('y').value, 1.3716)

        # Setting the same side again replaces it.
        self.assertEqual(half.to('km').from_('m').value, 0.0015)

        # Empty units leave that side unset.
        self.assertIsInstance(start.from_('').to(None), PartialConversion)
        self.assertIsInstance(start.from_(None).to('m'), PartialConversion)

    def test_failure(self):
        from measurement.units import (Converted, Failure, FAILURE,
                                       Measurement)

        res = Measurement('Speed').convert(5).from_('mph').to('unknown')
        self.assertIsInstance(res, Converted)
        self.assertIs(res.value, FAILURE)
        self.assertIs(res.reason, Failure.UNKNOWN_UNIT)
        self.assertFalse(res.ok)
        with self.assertRaises(ValueError):
            float(res)

        res = Measurement('Temperature').convert(5).from_('K').to('°R')
        self.assertIs(res.reason, Failure.UNKNOWN_CATEGORY)

        with self.assertRaises(TypeError):
            Measurement('Speed').convert('fast').from_('mph').to('kn')

    def test_match(self):
        from measurement.units import (Converted, Failure, Measurement,
                                       PartialConversion)

        def describe(res) -> str:
            match res:
                case PartialConversion():
                    return 'waiting'
                case Converted(value, None):
                    return f"{value:.0f}"
                case Converted(_, Failure.UNKNOWN_UNIT):
                    return 'bad unit'
                case _:
                    return 'other'

        dist = Measurement('Distance')
        self.assertEqual(describe(dist.convert(2).from_('km')), 'waiting')
        self.assertEqual(describe(dist.convert(2).from_('km').to('m')),
                         '2000')
        self.assertEqual(describe(dist.convert(2).from_('km').to('ft')),
                         'bad unit')

    def test_start_conversion(self):
        from measurement.units import (Converter, UnitDef, UnitTable,
                                       start_conversion)

        res = start_conversion('Pressure', 1).from_('bar').to('hPa')
        self.assertAlmostEqual(res.value, 10000)

        table = UnitTable({'Mass': {'kg': UnitDef('kg'),
                                    'g': UnitDef('g', 'kg', 0.001)}})
        res = start_conversion('Mass', 250, converter=Converter(table))
        self.assertAlmostEqual(res.from_('g').to('kg').value, 0.25)

    def test_converted(self):
        from measurement.units import (Converted, Failure, FAILURE,
                                       Measurement)
        import numpy as np

        # Results holding arrays compare elementwise.
        dist = Measurement('Distance')
        a = dist.convert(np.array([1.0, 2.0])).from_('km').to('m')
        b = dist.convert(np.array([1.0, 2.0])).to('m').from_('km')
        self.assertEqual(a, b)
        self.assertNotEqual(a, Converted(np.array([1000.0, 2001.0])))
        self.assertNotEqual(a, Converted(np.array([1000.0])))

        # Failures compare by reason.
        self.assertEqual(Converted(FAILURE, Failure.UNKNOWN_UNIT),
                         Converted(FAILURE, Failure.UNKNOWN_UNIT))
        self.assertNotEqual(Converted(FAILURE, Failure.UNKNOWN_UNIT),
                            Converted(FAILURE, Failure.UNRESOLVABLE))
        self.assertNotEqual(Converted(FAILURE), Converted(0.0))

        # A failed value without a reason is still reported as failed.
        res = Converted(FAILURE)
        self.assertFalse(res.ok)
        with self.assertRaises(ValueError):
            float(res)
