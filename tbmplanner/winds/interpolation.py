# tbmplanner/winds/interpolation.py
"""
Altitude and direction interpolation over a WindProfile.
"""
import math
from typing import Iterable, List, Optional

from .data_models import WindProfile, WindSample
from .gridded_decoder import uv_to_wind, wind_to_uv

def interpolate_direction(d1: float, d2: float, fraction: float) -> float:
    """Interpolates between two bearings along the shorter arc, result in [0, 360)."""
    diff = ((d2 - d1 + 540) % 360) - 180
    return (d1 + diff * fraction + 360) % 360

def _lerp(a: float, b: float, fraction: float) -> float:
    return a + (b - a) * fraction

def _interpolate_samples(lower: WindSample, upper: WindSample, altitude_ft: float, use_components: bool) -> WindSample:
    fraction = (altitude_ft - lower.altitude_ft) / (upper.altitude_ft - lower.altitude_ft)

    if lower.temperature_c is not None and upper.temperature_c is not None:
        temp = _lerp(lower.temperature_c, upper.temperature_c, fraction)
    else:
        temp = lower.temperature_c if lower.temperature_c is not None else upper.temperature_c

    pressure = None
    if lower.pressure_mb is not None and upper.pressure_mb is not None:
        pressure = _lerp(lower.pressure_mb, upper.pressure_mb, fraction)

    if use_components and lower.has_components and upper.has_components:
        u = _lerp(lower.u_ms, upper.u_ms, fraction)
        v = _lerp(lower.v_ms, upper.v_ms, fraction)
        direction, speed = uv_to_wind(u, v)
        return WindSample(direction, speed, temp, altitude_ft, pressure, u, v)

    direction = interpolate_direction(lower.direction_deg, upper.direction_deg, fraction)
    speed = _lerp(lower.speed_kt, upper.speed_kt, fraction)
    return WindSample(direction, speed, temp, altitude_ft, pressure)

def _scaled_below(sample: WindSample, altitude_ft: float) -> WindSample:
    # Model levels stop above the surface; taper linearly to calm at 0 ft.
    factor = max(0.0, min(1.0, altitude_ft / sample.altitude_ft)) if sample.altitude_ft > 0 else 1.0
    u = sample.u_ms * factor if sample.u_ms is not None else None
    v = sample.v_ms * factor if sample.v_ms is not None else None
    return WindSample(sample.direction_deg, sample.speed_kt * factor, sample.temperature_c,
                      altitude_ft, sample.pressure_mb, u, v)

def wind_at_altitude(profile: Optional[WindProfile], altitude_ft: float) -> Optional[WindSample]:
    """
    Wind at `altitude_ft` from a profile, or None if the profile is empty.
    Above the top level the top sample holds. Below the lowest level station
    data holds the lowest sample while gridded data tapers toward calm.
    """
    if profile is None or not profile.samples:
        return None
    samples = profile.samples
    gridded = profile.source == "gridded"

    if altitude_ft <= samples[0].altitude_ft:
        if gridded and altitude_ft < samples[0].altitude_ft:
            return _scaled_below(samples[0], altitude_ft)
        return samples[0]
    if altitude_ft >= samples[-1].altitude_ft:
        return samples[-1]

    for lower, upper in zip(samples, samples[1:]):
        if altitude_ft == upper.altitude_ft:
            return upper
        if lower.altitude_ft < altitude_ft < upper.altitude_ft:
            return _interpolate_samples(lower, upper, altitude_ft, use_components=gridded)
    return samples[-1]

def average_profiles(profiles: Iterable[WindProfile]) -> Optional[WindProfile]:
    """
    Component-averages several profiles at the altitudes they all share.
    Used to build a single departure or arrival column for climb/descent.
    """
    profiles = [p for p in profiles if p is not None and p.samples]
    if not profiles:
        return None
    if len(profiles) == 1:
        return profiles[0]

    common = set(profiles[0].altitudes)
    for p in profiles[1:]:
        common &= set(p.altitudes)
    if not common:
        return None

    samples: List[WindSample] = []
    for altitude in sorted(common):
        us, vs = [], []
        for p in profiles:
            s = next(s for s in p.samples if s.altitude_ft == altitude)
            u, v = (s.u_ms, s.v_ms) if s.has_components else wind_to_uv(s.direction_deg, s.speed_kt)
            us.append(u)
            vs.append(v)
        u, v = sum(us) / len(us), sum(vs) / len(vs)
        direction, speed = uv_to_wind(u, v)
        if math.isclose(speed, 0.0, abs_tol=1e-9):
            direction = 0.0
        samples.append(WindSample(direction, speed, altitude_ft=altitude, u_ms=u, v_ms=v))
    return WindProfile(tuple(samples), source=profiles[0].source)
