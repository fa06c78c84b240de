# tbmplanner/winds/ground_speed.py
"""
Wind-triangle ground speed and the segment-weighted route integrator.

Each wind sample along the route owns a segment bounded halfway (optionally
cross-track weighted) to its neighbours. Flight time is accumulated per
segment as distance / ground speed, so a headwind costs more time than an
equal tailwind saves. Distance without usable wind is flown at TAS.
"""
import logging
import math
from typing import Callable, List, Optional, Sequence, Tuple

from .constants import WindConstants
from .data_models import GroundSpeedResult, RouteWindData, RouteWindPoint, WindProfile, WindSummary
from .interpolation import wind_at_altitude

def wind_components(direction_deg: float, speed_kt: float, course_deg: float) -> Tuple[float, float]:
    """(headwind, crosswind) in kt. Positive headwind opposes the aircraft."""
    angle = math.radians(direction_deg - course_deg)
    return speed_kt * math.cos(angle), speed_kt * math.sin(angle)

def wind_triangle_ground_speed(tas_kt: float, direction_deg: float, speed_kt: float, course_deg: float) -> float:
    headwind, crosswind = wind_components(direction_deg, speed_kt, course_deg)
    if crosswind**2 < tas_kt**2:
        gs = math.sqrt(tas_kt**2 - crosswind**2) - headwind
    else:
        gs = tas_kt - abs(headwind)
    return max(gs, WindConstants.MIN_GROUND_SPEED_KT)

def _segment_weight(point: RouteWindPoint) -> float:
    return 1.0 / (1.0 + abs(point.cross_track_nm) / WindConstants.CROSS_TRACK_WEIGHT_SCALE_NM)

def segment_boundaries(points: Sequence[RouteWindPoint], total_distance_nm: float,
                       cross_track_weighting: bool = False) -> List[Tuple[float, float]]:
    """(start, end) along-route distances owned by each point, in point order."""
    if not points:
        return []
    positions = [min(max(p.dist_from_dep_nm, 0.0), total_distance_nm) for p in points]

    def cut(i: int) -> float:
        a, b = positions[i], positions[i + 1]
        if cross_track_weighting:
            wa, wb = _segment_weight(points[i]), _segment_weight(points[i + 1])
            return a + (b - a) * wa / (wa + wb)
        return (a + b) / 2

    cuts = [cut(i) for i in range(len(points) - 1)]
    starts = [0.0] + cuts
    ends = cuts + [total_distance_nm]
    return list(zip(starts, ends))

def effective_ground_speed(route_winds: Optional[RouteWindData], altitude_ft: float, course_deg: float,
                           tas_kt: float, cross_track_weighting: bool = False) -> GroundSpeedResult:
    """Time-weighted effective ground speed over the whole route at one altitude."""
    total = route_winds.total_distance_nm if route_winds else 0.0
    if not route_winds or not route_winds.points or total <= 0:
        return GroundSpeedResult(tas_kt, total / tas_kt if tas_kt > 0 else 0.0, 0.0, 0.0, 0, 0.0)

    points = sorted(route_winds.points, key=lambda p: p.dist_from_dep_nm)
    time_hr = covered = headwind_time = speed_time = 0.0
    segments = 0
    for point, (start, end) in zip(points, segment_boundaries(points, total, cross_track_weighting)):
        seg_dist = end - start
        if seg_dist <= 0:
            continue
        wind = wind_at_altitude(point.profile, altitude_ft)
        if wind is None:
            continue
        gs = wind_triangle_ground_speed(tas_kt, wind.direction_deg, wind.speed_kt, course_deg)
        headwind, _ = wind_components(wind.direction_deg, wind.speed_kt, course_deg)
        seg_time = seg_dist / gs
        time_hr += seg_time
        covered += seg_dist
        headwind_time += headwind * seg_time
        speed_time += wind.speed_kt * seg_time
        segments += 1

    wind_time = time_hr
    if covered < total:
        time_hr += (total - covered) / tas_kt

    if segments == 0:
        return GroundSpeedResult(tas_kt, time_hr, 0.0, 0.0, 0, 0.0)
    return GroundSpeedResult(
        ground_speed_kt=total / time_hr,
        time_hr=time_hr,
        headwind_kt=headwind_time / wind_time,
        avg_wind_speed_kt=speed_time / wind_time,
        segment_count=segments,
        covered_distance_nm=covered,
    )

def describe_wind(headwind_kt: float) -> str:
    if abs(headwind_kt) < WindConstants.CALM_THRESHOLD_KT:
        return "Calm winds"
    if headwind_kt > 0:
        return f"Headwind {headwind_kt:.0f} kt"
    return f"Tailwind {-headwind_kt:.0f} kt"

def summarize_winds(route_winds: Optional[RouteWindData], altitude_ft: float, course_deg: float,
                    tas_kt: float, cross_track_weighting: bool = False) -> WindSummary:
    """Wind summary for one cruise altitude; still air when there is nothing to apply."""
    if route_winds is None or not route_winds.available:
        return WindSummary.still_air(tas_kt)
    result = effective_ground_speed(route_winds, altitude_ft, course_deg, tas_kt, cross_track_weighting)
    if result.segment_count == 0:
        return WindSummary.still_air(tas_kt)
    effective_headwind = tas_kt - result.ground_speed_kt
    return WindSummary(
        available=True,
        ground_speed_kt=result.ground_speed_kt,
        headwind_kt=effective_headwind,
        avg_wind_speed_kt=result.avg_wind_speed_kt,
        sample_count=result.segment_count,
        source=route_winds.source,
        description=describe_wind(effective_headwind),
    )

def phase_wind_ratio(profile: Optional[WindProfile], low_ft: float, high_ft: float, course_deg: float,
                     tas_at: Callable[[float], float], rate_at: Callable[[float], float]) -> float:
    """
    Ratio of average ground speed to average true airspeed through a climb or
    descent between `low_ft` and `high_ft`, time-weighted by the vertical rate.
    Multiplying book climb/descent distance by this ratio gives the ground
    distance covered in wind.
    """
    if profile is None or not profile.samples or high_ft <= low_ft:
        return 1.0
    band = WindConstants.PHASE_BAND_FT
    air = ground = 0.0
    alt = low_ft
    while alt < high_ft:
        step = min(band, high_ft - alt)
        mid = alt + step / 2
        dt = step / rate_at(mid)
        tas = tas_at(mid)
        wind = wind_at_altitude(profile, mid)
        gs = tas if wind is None else wind_triangle_ground_speed(tas, wind.direction_deg, wind.speed_kt, course_deg)
        air += tas * dt
        ground += gs * dt
        alt += step
    if air <= 0:
        return 1.0
    lo, hi = WindConstants.PHASE_RATIO_LIMITS
    ratio = min(hi, max(lo, ground / air))
    logging.debug(f"Phase wind ratio {low_ft:.0f}-{high_ft:.0f} ft on {course_deg:.0f}: {ratio:.3f}")
    return ratio
