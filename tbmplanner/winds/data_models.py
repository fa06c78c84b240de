# tbmplanner/winds/data_models.py
"""
Wind records shared by both decoders. Samples are immutable; a profile is an
altitude-ordered column of samples over one geographic point.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .exceptions import WindDataError

@dataclass(frozen=True)
class WindSample:
    """Wind FROM `direction_deg` (true) at `speed_kt`."""
    direction_deg: float
    speed_kt: float
    temperature_c: Optional[float] = None
    altitude_ft: Optional[float] = None
    pressure_mb: Optional[float] = None
    # Source components in m/s, only present for gridded model data
    u_ms: Optional[float] = None
    v_ms: Optional[float] = None

    @property
    def has_components(self) -> bool:
        return self.u_ms is not None and self.v_ms is not None

@dataclass(frozen=True)
class WindProfile:
    samples: Tuple[WindSample, ...]
    source: str = "station"
    ident: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'samples', tuple(self.samples))
        altitudes = [s.altitude_ft for s in self.samples]
        if any(a is None for a in altitudes):
            raise WindDataError("Every profile sample needs an altitude key")
        for lower, upper in zip(altitudes, altitudes[1:]):
            if upper <= lower:
                raise WindDataError(f"Profile altitudes must be strictly increasing ({lower} -> {upper})")

    @property
    def altitudes(self) -> List[float]:
        return [s.altitude_ft for s in self.samples]

    def __len__(self) -> int:
        return len(self.samples)

@dataclass
class RouteWindPoint:
    """A wind profile placed on the route."""
    lat: float
    lon: float
    dist_from_dep_nm: float
    profile: WindProfile
    cross_track_nm: float = 0.0

@dataclass
class RouteWindData:
    points: List[RouteWindPoint]
    total_distance_nm: float
    source: str
    cycle: Optional[str] = None
    failed_points: int = 0

    @property
    def available(self) -> bool:
        return any(len(p.profile) > 0 for p in self.points)

@dataclass
class GroundSpeedResult:
    ground_speed_kt: float
    time_hr: float
    headwind_kt: float
    avg_wind_speed_kt: float
    segment_count: int
    covered_distance_nm: float

@dataclass
class WindSummary:
    """How wind was applied to one cruise altitude."""
    available: bool
    ground_speed_kt: float
    headwind_kt: float = 0.0
    avg_wind_speed_kt: float = 0.0
    sample_count: int = 0
    source: str = "none"
    description: str = "Still air (no wind data)"

    @classmethod
    def still_air(cls, tas_kt: float) -> "WindSummary":
        return cls(available=False, ground_speed_kt=tas_kt)
