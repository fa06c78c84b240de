#!/usr/bin/env python3
# tbmplanner/fuel_stops/tests/test_corridor.py
import math
import unittest

from tbmplanner.airports.data_models import Airport
from tbmplanner.airports.directory import AirportDirectory
from tbmplanner.fuel_stops.corridor import CorridorSearch, is_candidate_airport
from tbmplanner.route.constants import RouteConstants

def _lat_at(distance_nm, start=20.0):
    return start + math.degrees(distance_nm / RouteConstants.EARTH_RADIUS_NM)

DEP = Airport("KDEP", 20.0, -95.0, airport_type="large_airport")
DEST = Airport("KDST", _lat_at(1600), -95.0, airport_type="large_airport")
MID_LAT = _lat_at(800)

class TestCorridorSearch(unittest.TestCase):
    def setUp(self):
        self.airports = [
            DEP, DEST,
            Airport("KMID", MID_LAT, -94.9, airport_type="large_airport"),        # ~5 NM off
            Airport("KOFF", MID_LAT + 1, -94.3, airport_type="medium_airport"),   # ~35 NM off
            Airport("KFAR", MID_LAT, -93.5, airport_type="medium_airport"),       # ~75 NM off
            Airport("KNER", _lat_at(100), -95.0, airport_type="large_airport"),   # too close to departure
            Airport("KEND", _lat_at(1570), -95.0, airport_type="large_airport"),  # inside the descent
            Airport("KSML", MID_LAT - 1, -95.0, airport_type="small_airport"),
            Airport("MMXX", MID_LAT + 2, -95.0, airport_type="large_airport"),
            Airport("KWST", _lat_at(600), -95.1, airport_type="medium_airport"),  # ~5 NM off
        ]
        self.search = CorridorSearch(AirportDirectory(self.airports))

    def test_candidate_filter(self):
        self.assertTrue(is_candidate_airport(Airport("KMID", 0, 0, airport_type="large_airport")))
        self.assertTrue(is_candidate_airport(Airport("PHNL", 0, 0, airport_type="medium_airport")))
        self.assertFalse(is_candidate_airport(Airport("KSML", 0, 0, airport_type="small_airport")))
        self.assertFalse(is_candidate_airport(Airport("MMMX", 0, 0, airport_type="large_airport")))
        self.assertFalse(is_candidate_airport(Airport("K12", 0, 0, airport_type="medium_airport")))

    def test_scan_uses_member_width(self):
        idents = {c.ident for c in self.search.scan(DEP, DEST)}
        self.assertEqual(idents, {"KMID", "KOFF", "KWST"})

    def test_candidate_geometry(self):
        mid = next(c for c in self.search.scan(DEP, DEST) if c.ident == "KMID")
        self.assertAlmostEqual(mid.along_track_nm, 800, delta=1)
        self.assertAlmostEqual(mid.cross_track_nm, 5.0, delta=0.5)
        self.assertGreaterEqual(mid.cross_track_nm, 0)
        self.assertAlmostEqual(mid.dist_from_dep_nm + mid.dist_from_dest_nm, 1600, delta=1)

    def test_standard_corridor(self):
        idents = [c.ident for c in self.search.find_candidates(DEP, DEST)]
        self.assertEqual(sorted(idents), ["KMID", "KWST"])

    def test_members_get_wider_corridor_and_priority(self):
        candidates = self.search.find_candidates(DEP, DEST, member_idents=["koff"])
        self.assertEqual(candidates[0].ident, "KOFF")
        self.assertTrue(candidates[0].is_discount_program)
        self.assertEqual(len(candidates), 3)

    def test_candidate_cap(self):
        search = CorridorSearch(AirportDirectory(self.airports), max_candidates=1)
        self.assertEqual(len(search.find_candidates(DEP, DEST)), 1)

    def test_short_route_has_no_candidates(self):
        near = Airport("KNEX", _lat_at(250), -95.0, airport_type="large_airport")
        self.assertEqual(self.search.find_candidates(DEP, near), [])

if __name__ == '__main__':
    unittest.main()
