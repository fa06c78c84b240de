# tbmplanner/winds/gridded_decoder.py
"""
Decoder for gridded model (GFS 0.25 degree) point queries served by the
NOMADS GrADS Data Server as OPeNDAP ASCII:

    ugrdprs, [1][11][1][1]
    [0][0][0], -12.34
    [0][1][0], -14.56
    ...
    vgrdprs, [1][11][1][1]
    [0][0][0], 5.67

The second bracket is the level index relative to the start of the queried
level range. Components are in m/s, u positive east and v positive north.
Also holds the grid, cycle and URL helpers needed to address one point.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from .constants import WindConstants
from .data_models import WindProfile, WindSample
from .exceptions import WindParseError

@dataclass(frozen=True)
class ModelCycle:
    date_str: str      # YYYYMMDD
    cycle_str: str     # e.g. "12z"
    start: datetime    # UTC

    @property
    def label(self) -> str:
        return f"{self.date_str}/{self.cycle_str}"

def uv_to_wind(u_ms: float, v_ms: float) -> Tuple[float, float]:
    """(direction FROM in degrees true, speed in kt) for a u/v pair in m/s."""
    speed_kt = math.sqrt(u_ms**2 + v_ms**2) * WindConstants.KT_PER_MS
    direction = (math.degrees(math.atan2(-u_ms, -v_ms)) + 360) % 360
    return direction, speed_kt

def wind_to_uv(direction_deg: float, speed_kt: float) -> Tuple[float, float]:
    """Inverse of uv_to_wind, returning m/s components."""
    speed_ms = speed_kt / WindConstants.KT_PER_MS
    rad = math.radians(direction_deg)
    return -speed_ms * math.sin(rad), -speed_ms * math.cos(rad)

def pressure_to_altitude_ft(pressure_mb: float) -> float:
    """Standard atmosphere pressure altitude."""
    return (1 - (pressure_mb / WindConstants.STD_PRESSURE_MB) ** WindConstants.STD_EXPONENT) * WindConstants.STD_SCALE_FT

def _is_fill(value: float) -> bool:
    return math.isnan(value) or abs(value) > WindConstants.FILL_VALUE_THRESHOLD

def parse_point_response(text: str, level_offset: int = WindConstants.GFS_LEVEL_OFFSET) -> Dict[int, Tuple[float, float]]:
    """
    Parses the raw ASCII response into {absolute level index: (u, v)}.
    Levels missing either component are dropped.

    Raises:
        WindParseError: if the response holds no usable u/v pair.
    """
    components: Dict[str, Dict[int, float]] = {'u': {}, 'v': {}}
    current = None
    for raw in (text or '').splitlines():
        line = raw.strip()
        if not line:
            continue
        if not line.startswith('['):
            if 'ugrdprs' in line:
                current = 'u'
            elif 'vgrdprs' in line:
                current = 'v'
            continue
        if current is None or ',' not in line:
            continue

        index_part, _, value_part = line.rpartition(',')
        indices = [int(i) for i in index_part.replace(']', ' ').replace('[', ' ').split() if i.isdigit()]
        if len(indices) < 2:
            continue
        try:
            value = float(value_part)
        except ValueError:
            continue
        if _is_fill(value):
            continue
        components[current][indices[1] + level_offset] = value

    levels = sorted(set(components['u']) & set(components['v']))
    if not levels:
        raise WindParseError("Point response contained no usable u/v wind components")
    return {lvl: (components['u'][lvl], components['v'][lvl]) for lvl in levels}

def decode_point_response(text: str, ident: Optional[str] = None) -> WindProfile:
    """Decodes a point response into an altitude-ordered gridded WindProfile."""
    samples = []
    for level, (u, v) in parse_point_response(text).items():
        pressure = WindConstants.GFS_LEVEL_PRESSURES.get(level)
        if pressure is None:
            continue
        direction, speed = uv_to_wind(u, v)
        samples.append(WindSample(
            direction_deg=direction,
            speed_kt=speed,
            altitude_ft=pressure_to_altitude_ft(pressure),
            pressure_mb=float(pressure),
            u_ms=u,
            v_ms=v,
        ))
    if not samples:
        raise WindParseError("Point response levels are outside the known pressure range")
    # Pressure falls with height, so order by altitude explicitly.
    samples.sort(key=lambda s: s.altitude_ft)
    return WindProfile(tuple(samples), source="gridded", ident=ident)

def is_error_page(text: str) -> bool:
    return any(marker in (text or '') for marker in WindConstants.GFS_ERROR_MARKERS)

# --- Grid addressing ---

def grid_lat_index(lat: float) -> int:
    return int(round((lat + 90) / WindConstants.GFS_GRID_RES_DEG))

def grid_lon_index(lon: float) -> int:
    lon360 = lon + 360 if lon < 0 else lon
    index = int(round(lon360 / WindConstants.GFS_GRID_RES_DEG))
    return index % int(round(360 / WindConstants.GFS_GRID_RES_DEG))

def select_model_cycle(now_utc: Optional[datetime] = None) -> ModelCycle:
    """Latest cycle old enough to be published, else yesterday's 18Z run."""
    now = now_utc or datetime.now(timezone.utc)
    day = datetime(now.year, now.month, now.day, tzinfo=timezone.utc)
    chosen = None
    for cycle in WindConstants.GFS_CYCLES:
        if now.hour >= cycle + WindConstants.GFS_AVAILABILITY_LAG_HR:
            chosen = cycle
            break
    if chosen is None:
        day -= timedelta(days=1)
        chosen = WindConstants.GFS_CYCLES[0]
    return ModelCycle(day.strftime('%Y%m%d'), f"{chosen:02d}z", day + timedelta(hours=chosen))

def forecast_time_index(cycle_start: datetime, valid_time: Optional[datetime] = None) -> int:
    """Forecast step index (3 h steps) nearest `valid_time`. Analysis when no time is given."""
    if valid_time is None:
        return 0
    if valid_time.tzinfo is None:
        valid_time = valid_time.replace(tzinfo=timezone.utc)
    hours = (valid_time - cycle_start).total_seconds() / 3600
    step = WindConstants.GFS_FORECAST_STEP_HR
    forecast_hr = int(round(hours / step)) * step
    forecast_hr = max(0, min(forecast_hr, WindConstants.GFS_MAX_FORECAST_HR))
    return forecast_hr // step

def build_point_query_url(base_url: str, cycle: ModelCycle, time_index: int, lat_index: int, lon_index: int) -> str:
    lo, hi = WindConstants.GFS_LEVEL_RANGE
    subset = f"[{time_index}][{lo}:{hi}][{lat_index}][{lon_index}]"
    return (f"{base_url}/gfs{cycle.date_str}/gfs_0p25_{cycle.cycle_str}.ascii"
            f"?ugrdprs{subset},vgrdprs{subset}")
