#!/usr/bin/env python3
# tbmplanner/route/tests/test_altitude_ranking.py
import unittest

from tbmplanner.airports.data_models import Airport
from tbmplanner.route.altitude import AltitudeRanker, legal_cruise_altitudes
from tbmplanner.winds.data_models import RouteWindData, RouteWindPoint, WindProfile, WindSample

def _headwind_above(altitude_ft, direction, speed):
    """Calm up to `altitude_ft`, then `speed` kt from `direction` above it."""
    return WindProfile((
        WindSample(0, 0, altitude_ft=3000),
        WindSample(0, 0, altitude_ft=altitude_ft),
        WindSample(direction, speed, altitude_ft=altitude_ft + 2000),
        WindSample(direction, speed, altitude_ft=39000),
    ))

class TestLegalAltitudes(unittest.TestCase):
    def test_eastbound_odd(self):
        self.assertEqual(legal_cruise_altitudes(90), [25000, 27000, 29000, 31000])
        self.assertEqual(legal_cruise_altitudes(0), [25000, 27000, 29000, 31000])
        self.assertEqual(legal_cruise_altitudes(179.9), [25000, 27000, 29000, 31000])

    def test_westbound_even(self):
        self.assertEqual(legal_cruise_altitudes(270), [24000, 26000, 28000, 30000])
        self.assertEqual(legal_cruise_altitudes(180), [24000, 26000, 28000, 30000])
        self.assertEqual(legal_cruise_altitudes(359.9), [24000, 26000, 28000, 30000])

    def test_custom_band(self):
        self.assertEqual(legal_cruise_altitudes(90, 10000, 14000), [11000, 13000])

class TestAltitudeRanker(unittest.TestCase):
    def setUp(self):
        self.ranker = AltitudeRanker()
        self.east = (Airport("KAAA", 0.0, 0.0), Airport("KBBB", 0.0, 10.0))
        self.west = (self.east[1], self.east[0])

    def test_eastbound_options(self):
        options = self.ranker.rank(*self.east)
        self.assertEqual(len(options), 3)
        self.assertTrue(all((o.altitude_ft // 1000) % 2 == 1 for o in options))
        self.assertEqual([o.rank for o in options], [1, 2, 3])
        times = [o.leg.total_time_min for o in options]
        self.assertEqual(times, sorted(times))

    def test_westbound_options(self):
        options = self.ranker.rank(*self.west)
        self.assertTrue(all((o.altitude_ft // 1000) % 2 == 0 for o in options))

    def test_still_air_summary(self):
        option = self.ranker.rank(*self.east)[0]
        self.assertFalse(option.wind_summary.available)
        self.assertEqual(option.wind_summary.ground_speed_kt, option.leg.cruise_tas_kt)

    def test_headwind_pushes_altitude_down(self):
        profile = _headwind_above(24000, 270, 150)
        total = 600.0
        winds = RouteWindData([RouteWindPoint(0.0, 10.0, 0.0, profile),
                               RouteWindPoint(0.0, 5.0, total / 2, profile),
                               RouteWindPoint(0.0, 0.0, total, profile)], total, "station")
        options = self.ranker.rank(*self.west, route_winds=winds)
        best = options[0]
        self.assertEqual(best.altitude_ft, 24000)
        self.assertEqual(best.flight_level, "FL240")
        self.assertEqual(best.wind_summary.description, "Calm winds")
        self.assertTrue(options[1].wind_summary.headwind_kt > 100)

    def test_max_options(self):
        self.assertEqual(len(AltitudeRanker(max_options=2).rank(*self.east)), 2)

if __name__ == '__main__':
    unittest.main()
