# tbmplanner/route/__init__.py
"""
Route geometry, the climb-cruise-descent leg calculator and IFR cruise
altitude ranking. Import the calculator and ranker from their modules:

    from tbmplanner.route.calculator import FlightCalculator
    from tbmplanner.route.altitude import AltitudeRanker
"""
from .utils.coordinates import (haversine_distance_nm, calculate_bearing, intermediate_point,
                                cross_track_distance_nm, along_track_distance_nm, route_waypoints)
