#!/usr/bin/env python3
# tbmplanner/winds/tests/test_route_winds.py
import unittest

from tbmplanner.winds.data_models import RouteWindData, WindProfile, WindSample
from tbmplanner.winds.route_winds import (arrival_profile, build_gridded_route_winds,
                                          build_station_route_winds, departure_profile,
                                          stations_along_route)

# Equator route (0,0) -> (0,10), about 600 NM
STATIONS = {
    'AAA': (0.5, 2.0),     # ~30 NM left of course
    'BBB': (0.0, -0.5),    # just behind departure
    'CCC': (0.0, -2.0),    # too far behind
    'DDD': (3.0, 5.0),     # too far off course
    'EEE': (0.0, 10.5),    # just past the destination
}

def _profile(direction, speed, ident=None):
    return WindProfile((WindSample(direction, speed, altitude_ft=24000),
                        WindSample(direction, speed, altitude_ft=30000)), ident=ident)

class TestStationsAlongRoute(unittest.TestCase):
    def test_filter_and_order(self):
        found = stations_along_route(0.0, 0.0, 0.0, 10.0, STATIONS)
        self.assertEqual([s[0] for s in found], ['BBB', 'AAA', 'EEE'])
        bbb, aaa, _ = found
        self.assertAlmostEqual(bbb[3], -30.0, delta=0.5)
        self.assertAlmostEqual(aaa[4], -30.0, delta=0.5)

    def test_known_stations_by_default(self):
        # Denver to New York passes many reporting stations
        found = stations_along_route(39.86, -104.67, 40.64, -73.78)
        self.assertGreater(len(found), 5)
        self.assertIn('DEN', [s[0] for s in found])

class TestRouteWindAssembly(unittest.TestCase):
    def test_station_route_winds(self):
        profiles = {'AAA': _profile(270, 40, 'AAA'), 'EEE': _profile(90, 20, 'EEE'), 'ZZZ': _profile(0, 10)}
        winds = build_station_route_winds(profiles, 0.0, 0.0, 0.0, 10.0, STATIONS)
        self.assertEqual(winds.source, "station")
        self.assertEqual([p.profile.ident for p in winds.points], ['AAA', 'EEE'])
        self.assertAlmostEqual(winds.total_distance_nm, 600.4, delta=0.5)
        self.assertLess(winds.points[0].cross_track_nm, 0)

    def test_no_station_on_route(self):
        self.assertIsNone(build_station_route_winds({'DDD': _profile(0, 10)}, 0.0, 0.0, 0.0, 10.0, STATIONS))

    def test_gridded_route_winds(self):
        samples = [(0.0, 0.0, 0.0, _profile(270, 40)), (0.0, 5.0, 300.0, None), (0.0, 10.0, 600.0, _profile(270, 60))]
        winds = build_gridded_route_winds(samples, 600.0, cycle="20240310/12z")
        self.assertEqual(len(winds.points), 2)
        self.assertEqual(winds.failed_points, 1)
        self.assertEqual(winds.cycle, "20240310/12z")
        self.assertIsNone(build_gridded_route_winds([(0.0, 0.0, 0.0, None)], 600.0))

    def test_phase_profiles(self):
        samples = [(0.0, float(i), i * 60.0, _profile(270, 10 * (i + 1))) for i in range(6)]
        winds = build_gridded_route_winds(samples, 300.0)
        # First three points average 10/20/30 kt, last three 40/50/60 kt
        self.assertAlmostEqual(departure_profile(winds).samples[0].speed_kt, 20.0)
        self.assertAlmostEqual(arrival_profile(winds).samples[0].speed_kt, 50.0)
        self.assertIsNone(departure_profile(None))
        self.assertIsNone(arrival_profile(RouteWindData([], 0.0, "gridded")))

if __name__ == '__main__':
    unittest.main()
