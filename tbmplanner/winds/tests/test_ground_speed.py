#!/usr/bin/env python3
# tbmplanner/winds/tests/test_ground_speed.py
import unittest

from tbmplanner.winds.data_models import RouteWindData, RouteWindPoint, WindProfile, WindSample
from tbmplanner.winds.ground_speed import (describe_wind, effective_ground_speed, phase_wind_ratio,
                                           segment_boundaries, summarize_winds, wind_components,
                                           wind_triangle_ground_speed)

def _uniform(direction, speed):
    return WindProfile((WindSample(direction, speed, altitude_ft=3000),
                        WindSample(direction, speed, altitude_ft=39000)))

def _point(dist, profile, xt=0.0):
    return RouteWindPoint(0.0, 0.0, dist, profile, cross_track_nm=xt)

class TestWindTriangle(unittest.TestCase):
    def test_components(self):
        headwind, crosswind = wind_components(90, 40, 90)
        self.assertAlmostEqual(headwind, 40)
        self.assertAlmostEqual(crosswind, 0)
        headwind, crosswind = wind_components(0, 40, 90)
        self.assertAlmostEqual(headwind, 0)
        self.assertAlmostEqual(abs(crosswind), 40)

    def test_zero_wind(self):
        self.assertAlmostEqual(wind_triangle_ground_speed(300, 0, 0, 90), 300)

    def test_head_and_tail(self):
        self.assertAlmostEqual(wind_triangle_ground_speed(300, 90, 50, 90), 250)
        self.assertAlmostEqual(wind_triangle_ground_speed(300, 270, 50, 90), 350)

    def test_crosswind_costs_speed(self):
        gs = wind_triangle_ground_speed(300, 0, 50, 90)
        self.assertLess(gs, 300)
        self.assertAlmostEqual(gs, (300**2 - 50**2) ** 0.5)

    def test_floor(self):
        self.assertEqual(wind_triangle_ground_speed(100, 90, 80, 90), 50)

    def test_crosswind_beyond_airspeed(self):
        self.assertAlmostEqual(wind_triangle_ground_speed(60, 0, 100, 90), 60)

class TestSegments(unittest.TestCase):
    def test_midpoint_boundaries(self):
        points = [_point(0, None), _point(100, None), _point(300, None)]
        self.assertEqual(segment_boundaries(points, 400), [(0.0, 50.0), (50.0, 200.0), (200.0, 400.0)])

    def test_positions_clamped_to_route(self):
        points = [_point(-40, None), _point(460, None)]
        self.assertEqual(segment_boundaries(points, 400), [(0.0, 200.0), (200.0, 400.0)])

    def test_cross_track_weighting(self):
        points = [_point(0, None, xt=0), _point(100, None, xt=-50)]
        (_, cut), _ = segment_boundaries(points, 100, cross_track_weighting=True)
        # The on-track point (weight 1) owns more than the 50 NM offset one (weight 0.5)
        self.assertAlmostEqual(cut, 100 / 1.5)

    def test_no_points(self):
        self.assertEqual(segment_boundaries([], 100), [])

class TestEffectiveGroundSpeed(unittest.TestCase):
    def test_still_air(self):
        result = effective_ground_speed(None, 28000, 90, 287)
        self.assertEqual(result.ground_speed_kt, 287)
        self.assertEqual(result.segment_count, 0)

    def test_uniform_headwind(self):
        winds = RouteWindData([_point(0, _uniform(90, 50)), _point(500, _uniform(90, 50))], 1000, "station")
        result = effective_ground_speed(winds, 28000, 90, 300)
        self.assertAlmostEqual(result.ground_speed_kt, 250)
        self.assertAlmostEqual(result.time_hr, 4.0)
        self.assertAlmostEqual(result.headwind_kt, 50)
        self.assertEqual(result.segment_count, 2)

    def test_headwind_costs_more_than_tailwind_saves(self):
        winds = RouteWindData([_point(0, _uniform(90, 50)), _point(1000, _uniform(270, 50))], 1000, "gridded")
        result = effective_ground_speed(winds, 28000, 90, 300)
        self.assertAlmostEqual(result.time_hr, 500 / 250 + 500 / 350)
        self.assertLess(result.ground_speed_kt, 300)

    def test_uncovered_distance_flown_at_tas(self):
        winds = RouteWindData([_point(0, _uniform(90, 50)), _point(1000, WindProfile(()))], 1000, "gridded")
        result = effective_ground_speed(winds, 28000, 90, 300)
        self.assertAlmostEqual(result.time_hr, 500 / 250 + 500 / 300)
        self.assertAlmostEqual(result.covered_distance_nm, 500)
        self.assertAlmostEqual(result.headwind_kt, 50)
        self.assertEqual(result.segment_count, 1)

class TestSummaries(unittest.TestCase):
    def test_describe(self):
        self.assertEqual(describe_wind(1.0), "Calm winds")
        self.assertEqual(describe_wind(24.6), "Headwind 25 kt")
        self.assertEqual(describe_wind(-20), "Tailwind 20 kt")

    def test_still_air_summary(self):
        summary = summarize_winds(None, 28000, 90, 287)
        self.assertFalse(summary.available)
        self.assertEqual(summary.ground_speed_kt, 287)
        self.assertEqual(summary.description, "Still air (no wind data)")

    def test_empty_profiles_are_still_air(self):
        winds = RouteWindData([_point(0, WindProfile(()))], 1000, "gridded")
        self.assertFalse(summarize_winds(winds, 28000, 90, 287).available)

    def test_effective_headwind(self):
        winds = RouteWindData([_point(0, _uniform(90, 50)), _point(1000, _uniform(270, 50))], 1000, "gridded")
        summary = summarize_winds(winds, 28000, 90, 300)
        self.assertTrue(summary.available)
        self.assertEqual(summary.source, "gridded")
        self.assertAlmostEqual(summary.headwind_kt, 300 - summary.ground_speed_kt)
        self.assertEqual(summary.description, "Headwind 8 kt")
        self.assertAlmostEqual(summary.avg_wind_speed_kt, 50)

class TestPhaseWindRatio(unittest.TestCase):
    def test_ratio(self):
        ratio = phase_wind_ratio(_uniform(90, 50), 0, 28000, 90, lambda a: 200.0, lambda a: 1000.0)
        self.assertAlmostEqual(ratio, 0.75)

    def test_ratio_limits(self):
        ratio = phase_wind_ratio(_uniform(270, 150), 0, 28000, 90, lambda a: 200.0, lambda a: 1000.0)
        self.assertEqual(ratio, 1.5)

    def test_neutral_cases(self):
        self.assertEqual(phase_wind_ratio(None, 0, 28000, 90, lambda a: 200.0, lambda a: 1000.0), 1.0)
        self.assertEqual(phase_wind_ratio(_uniform(90, 50), 28000, 28000, 90,
                                          lambda a: 200.0, lambda a: 1000.0), 1.0)

if __name__ == '__main__':
    unittest.main()
