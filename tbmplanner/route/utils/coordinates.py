# tbmplanner/route/utils/coordinates.py
"""
Great-circle geometry on a spherical earth. Logging is omitted here as these
are high-frequency, low-level functions called from every other module.
"""
import math
from typing import List, Tuple

from ..constants import RouteConstants

def haversine_distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)
    dlon = lon2_rad - lon1_rad; dlat = lat2_rad - lat1_rad
    a = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a)))
    return RouteConstants.EARTH_RADIUS_NM * c

def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial true course from point 1 to point 2, in [0, 360)."""
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)
    dlon = lon2_rad - lon1_rad
    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)
    initial_bearing = math.atan2(y, x)
    return (math.degrees(initial_bearing) + 360) % 360

def intermediate_point(lat1: float, lon1: float, lat2: float, lon2: float, fraction: float) -> Tuple[float, float]:
    """
    Point at `fraction` (0..1) of the way along the great circle from point 1
    to point 2, by spherical linear interpolation.
    """
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)
    d = haversine_distance_nm(lat1, lon1, lat2, lon2) / RouteConstants.EARTH_RADIUS_NM
    if d == 0:
        return lat1, lon1

    a = math.sin((1 - fraction) * d) / math.sin(d)
    b = math.sin(fraction * d) / math.sin(d)
    x = a * math.cos(lat1_rad) * math.cos(lon1_rad) + b * math.cos(lat2_rad) * math.cos(lon2_rad)
    y = a * math.cos(lat1_rad) * math.sin(lon1_rad) + b * math.cos(lat2_rad) * math.sin(lon2_rad)
    z = a * math.sin(lat1_rad) + b * math.sin(lat2_rad)
    lat = math.atan2(z, math.sqrt(x**2 + y**2))
    lon = math.atan2(y, x)
    return math.degrees(lat), math.degrees(lon)

def cross_track_distance_nm(lat: float, lon: float, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Signed perpendicular distance of a point from the great circle 1 -> 2.
    Positive is right of course.
    """
    R = RouteConstants.EARTH_RADIUS_NM
    d13 = haversine_distance_nm(lat1, lon1, lat, lon) / R
    theta13 = math.radians(calculate_bearing(lat1, lon1, lat, lon))
    theta12 = math.radians(calculate_bearing(lat1, lon1, lat2, lon2))
    return math.asin(math.sin(d13) * math.sin(theta13 - theta12)) * R

def along_track_distance_nm(lat: float, lon: float, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Distance from point 1 along the great circle 1 -> 2 to the foot of the
    perpendicular from the point. Negative when the point lies behind point 1.
    """
    R = RouteConstants.EARTH_RADIUS_NM
    d13 = haversine_distance_nm(lat1, lon1, lat, lon) / R
    if d13 == 0:
        return 0.0
    theta13 = math.radians(calculate_bearing(lat1, lon1, lat, lon))
    theta12 = math.radians(calculate_bearing(lat1, lon1, lat2, lon2))
    xt = math.asin(math.sin(d13) * math.sin(theta13 - theta12))
    cos_xt = math.cos(xt)
    if cos_xt == 0:
        return 0.0
    ratio = max(-1.0, min(1.0, math.cos(d13) / cos_xt))
    along = math.acos(ratio) * R
    return along if math.cos(theta13 - theta12) >= 0 else -along

def route_waypoints(lat1: float, lon1: float, lat2: float, lon2: float,
                    num_segments: int = RouteConstants.ROUTE_SAMPLE_SEGMENTS) -> List[Tuple[float, float, float]]:
    """Evenly spaced (lat, lon, dist_from_dep_nm) samples, both endpoints included."""
    total = haversine_distance_nm(lat1, lon1, lat2, lon2)
    num_segments = max(1, num_segments)
    points = []
    for i in range(num_segments + 1):
        fraction = i / num_segments
        lat, lon = intermediate_point(lat1, lon1, lat2, lon2, fraction)
        points.append((lat, lon, total * fraction))
    return points

def estimate_magnetic_variation(lat: float, lon: float) -> float:
    """Rough CONUS variation in degrees, east positive. Good to a few degrees."""
    return (RouteConstants.MAGVAR_LON_COEFF * lon
            + RouteConstants.MAGVAR_LAT_COEFF * lat
            + RouteConstants.MAGVAR_OFFSET)

def true_to_magnetic(true_course: float, variation_deg: float) -> float:
    # East is least
    return (true_course - variation_deg) % 360
