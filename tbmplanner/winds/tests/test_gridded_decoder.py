#!/usr/bin/env python3
# tbmplanner/winds/tests/test_gridded_decoder.py
import unittest
from datetime import datetime, timedelta, timezone

from tbmplanner.winds.exceptions import WindParseError
from tbmplanner.winds.gridded_decoder import (ModelCycle, build_point_query_url, decode_point_response,
                                              forecast_time_index, grid_lat_index, grid_lon_index,
                                              is_error_page, parse_point_response, pressure_to_altitude_ft,
                                              select_model_cycle, uv_to_wind, wind_to_uv)

SAMPLE_RESPONSE = """ugrdprs, [1][3][1][1]
[0][0][0], -10.0
[0][1][0], 9.999E20
[0][2][0], 5.0

vgrdprs, [1][3][1][1]
[0][0][0], 0.0
[0][1][0], 3.0
[0][2][0], 0.0

time, [1]
738000.0
lev, [3]
700.0, 650.0, 600.0
"""

class TestConversions(unittest.TestCase):
    def test_cardinal_directions(self):
        # Air moving south comes from the north
        direction, speed = uv_to_wind(0.0, -10.0)
        self.assertAlmostEqual(direction % 360, 0.0)
        self.assertAlmostEqual(speed, 19.4384)
        self.assertAlmostEqual(uv_to_wind(-10.0, 0.0)[0], 90.0)
        self.assertAlmostEqual(uv_to_wind(0.0, 10.0)[0], 180.0)
        self.assertAlmostEqual(uv_to_wind(10.0, 0.0)[0], 270.0)

    def test_inverse(self):
        u, v = wind_to_uv(225.0, 38.8768)
        self.assertAlmostEqual(u, 20.0 / 2 ** 0.5, places=4)
        self.assertAlmostEqual(v, 20.0 / 2 ** 0.5, places=4)

    def test_pressure_altitude(self):
        self.assertAlmostEqual(pressure_to_altitude_ft(1013.25), 0.0)
        self.assertAlmostEqual(pressure_to_altitude_ft(500), 18289, delta=100)
        self.assertAlmostEqual(pressure_to_altitude_ft(300), 30065, delta=150)
        self.assertGreater(pressure_to_altitude_ft(200), pressure_to_altitude_ft(250))

class TestPointResponse(unittest.TestCase):
    def test_levels_and_fill_values(self):
        levels = parse_point_response(SAMPLE_RESPONSE)
        # Level 9 has a fill value in u and is dropped entirely
        self.assertEqual(levels, {8: (-10.0, 0.0), 10: (5.0, 0.0)})

    def test_decoded_profile(self):
        profile = decode_point_response(SAMPLE_RESPONSE, ident="P01")
        self.assertEqual(profile.source, "gridded")
        self.assertEqual(profile.ident, "P01")
        self.assertEqual([s.pressure_mb for s in profile.samples], [700.0, 600.0])
        self.assertLess(profile.samples[0].altitude_ft, profile.samples[1].altitude_ft)
        self.assertAlmostEqual(profile.samples[0].direction_deg, 90.0)
        self.assertAlmostEqual(profile.samples[1].direction_deg, 270.0)
        self.assertTrue(profile.samples[0].has_components)

    def test_nothing_usable(self):
        with self.assertRaises(WindParseError):
            parse_point_response("ugrdprs, [1][1][1][1]\n[0][0][0], 9.999E20\nvgrdprs, [1][1][1][1]\n[0][0][0], 1.0\n")
        with self.assertRaises(WindParseError):
            parse_point_response("")

    def test_error_page(self):
        self.assertTrue(is_error_page("<html><body>GrADS Data Server - error</body></html>"))
        self.assertTrue(is_error_page("gfs20240101 is not an available dataset"))
        self.assertFalse(is_error_page(SAMPLE_RESPONSE))

class TestGridAddressing(unittest.TestCase):
    def test_grid_indices(self):
        self.assertEqual(grid_lat_index(-90), 0)
        self.assertEqual(grid_lat_index(0), 360)
        self.assertEqual(grid_lat_index(39.86), 519)
        self.assertEqual(grid_lon_index(0), 0)
        self.assertEqual(grid_lon_index(-95), 1060)
        self.assertEqual(grid_lon_index(359.95), 0)

    def test_cycle_selection(self):
        cycle = select_model_cycle(datetime(2024, 3, 10, 20, 0, tzinfo=timezone.utc))
        self.assertEqual((cycle.date_str, cycle.cycle_str), ("20240310", "12z"))
        self.assertEqual(cycle.start, datetime(2024, 3, 10, 12, tzinfo=timezone.utc))

        late = select_model_cycle(datetime(2024, 3, 10, 23, 30, tzinfo=timezone.utc))
        self.assertEqual(late.cycle_str, "18z")

    def test_cycle_before_first_availability_uses_yesterday(self):
        cycle = select_model_cycle(datetime(2024, 3, 1, 3, 0, tzinfo=timezone.utc))
        self.assertEqual((cycle.date_str, cycle.cycle_str), ("20240229", "18z"))
        self.assertEqual(cycle.label, "20240229/18z")

    def test_forecast_time_index(self):
        start = datetime(2024, 3, 10, 12, tzinfo=timezone.utc)
        self.assertEqual(forecast_time_index(start), 0)
        self.assertEqual(forecast_time_index(start, start + timedelta(hours=7)), 2)
        self.assertEqual(forecast_time_index(start, datetime(2024, 3, 10, 18)), 2)
        self.assertEqual(forecast_time_index(start, start - timedelta(hours=6)), 0)
        self.assertEqual(forecast_time_index(start, start + timedelta(days=30)), 128)

    def test_query_url(self):
        cycle = ModelCycle("20240310", "12z", datetime(2024, 3, 10, 12, tzinfo=timezone.utc))
        url = build_point_query_url("https://nomads.example/dods/gfs_0p25", cycle, 2, 360, 1060)
        self.assertEqual(url, "https://nomads.example/dods/gfs_0p25/gfs20240310/gfs_0p25_12z.ascii"
                              "?ugrdprs[2][8:18][360][1060],vgrdprs[2][8:18][360][1060]")

if __name__ == '__main__':
    unittest.main()
