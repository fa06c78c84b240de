# tbmplanner/winds/route_winds.py
"""
Places decoded wind profiles on a route. Station profiles are projected onto
the great circle by along/cross-track distance; gridded profiles already sit
on evenly spaced route samples.
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from ..route.utils.coordinates import (along_track_distance_nm, cross_track_distance_nm,
                                       haversine_distance_nm)
from .constants import NOAA_WIND_STATIONS, WindConstants
from .data_models import RouteWindData, RouteWindPoint, WindProfile
from .interpolation import average_profiles

# (station id, lat, lon, along-track nm, cross-track nm)
StationOnRoute = Tuple[str, float, float, float, float]

def stations_along_route(dep_lat: float, dep_lon: float, dest_lat: float, dest_lon: float,
                         stations: Optional[Dict[str, Tuple[float, float]]] = None,
                         max_cross_track_nm: float = WindConstants.MAX_STATION_CROSS_TRACK_NM) -> List[StationOnRoute]:
    """Reporting stations near the route centerline, ordered from departure."""
    stations = NOAA_WIND_STATIONS if stations is None else stations
    total = haversine_distance_nm(dep_lat, dep_lon, dest_lat, dest_lon)
    overrun = WindConstants.STATION_ROUTE_OVERRUN_NM
    found = []
    for ident, (lat, lon) in stations.items():
        xt = cross_track_distance_nm(lat, lon, dep_lat, dep_lon, dest_lat, dest_lon)
        if abs(xt) > max_cross_track_nm:
            continue
        along = along_track_distance_nm(lat, lon, dep_lat, dep_lon, dest_lat, dest_lon)
        if -overrun <= along <= total + overrun:
            found.append((ident, lat, lon, along, xt))
    found.sort(key=lambda s: s[3])
    return found

def build_station_route_winds(profiles: Dict[str, WindProfile], dep_lat: float, dep_lon: float,
                              dest_lat: float, dest_lon: float,
                              stations: Optional[Dict[str, Tuple[float, float]]] = None) -> Optional[RouteWindData]:
    """Route wind points for every decoded station that lies along the route."""
    total = haversine_distance_nm(dep_lat, dep_lon, dest_lat, dest_lon)
    points = []
    for ident, lat, lon, along, xt in stations_along_route(dep_lat, dep_lon, dest_lat, dest_lon, stations):
        profile = profiles.get(ident)
        if profile is None or not profile.samples:
            continue
        points.append(RouteWindPoint(lat, lon, along, profile, cross_track_nm=xt))
    if not points:
        logging.warning("No decoded wind stations lie along the route.")
        return None
    logging.info(f"Using {len(points)} wind stations along {total:.0f} NM route: "
                 f"{', '.join(p.profile.ident or '?' for p in points)}")
    return RouteWindData(points, total, source="station")

def build_gridded_route_winds(samples: Sequence[Tuple[float, float, float, Optional[WindProfile]]],
                              total_distance_nm: float, cycle: Optional[str] = None) -> Optional[RouteWindData]:
    """
    Args:
        samples: (lat, lon, dist_from_dep_nm, profile or None) per route sample.
    """
    points = [RouteWindPoint(lat, lon, dist, profile) for lat, lon, dist, profile in samples if profile is not None]
    failed = sum(1 for s in samples if s[3] is None)
    if not points:
        return None
    return RouteWindData(points, total_distance_nm, source="gridded", cycle=cycle, failed_points=failed)

def departure_profile(route_winds: Optional[RouteWindData]) -> Optional[WindProfile]:
    """Average column over the first few route points, for the climb."""
    if route_winds is None or not route_winds.points:
        return None
    points = sorted(route_winds.points, key=lambda p: p.dist_from_dep_nm)
    return average_profiles(p.profile for p in points[:WindConstants.PHASE_PROFILE_POINTS])

def arrival_profile(route_winds: Optional[RouteWindData]) -> Optional[WindProfile]:
    """Average column over the last few route points, for the descent."""
    if route_winds is None or not route_winds.points:
        return None
    points = sorted(route_winds.points, key=lambda p: p.dist_from_dep_nm)
    return average_profiles(p.profile for p in points[-WindConstants.PHASE_PROFILE_POINTS:])
