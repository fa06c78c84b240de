# tbmplanner/route/data_models.py
"""
Results of the leg calculator and the altitude ranker. Derived per planning
request and never stored.
"""
from dataclasses import dataclass
from typing import Optional

from ..airports.data_models import Airport
from ..airplane.data_models import PhaseResult
from ..winds.data_models import WindSummary

def format_time(minutes: float) -> str:
    """Minutes as H:MM."""
    total = int(round(minutes))
    return f"{total // 60}:{total % 60:02d}"

@dataclass
class RouteLeg:
    departure: Airport
    destination: Airport
    cruise_altitude_ft: float
    distance_nm: float
    true_course_deg: float
    climb: PhaseResult
    cruise: PhaseResult
    descent: PhaseResult
    cruise_tas_kt: float
    ground_speed_kt: float
    taxi_fuel_gal: float

    @property
    def total_time_min(self) -> float:
        return self.climb.time_min + self.cruise.time_min + self.descent.time_min

    @property
    def total_time_hr(self) -> float:
        return self.total_time_min / 60

    @property
    def total_fuel_gal(self) -> float:
        return self.climb.fuel_gal + self.cruise.fuel_gal + self.descent.fuel_gal + self.taxi_fuel_gal

    @property
    def phase_distance_nm(self) -> float:
        return self.climb.distance_nm + self.cruise.distance_nm + self.descent.distance_nm

    @property
    def formatted_time(self) -> str:
        return format_time(self.total_time_min)

@dataclass
class AltitudeOption:
    altitude_ft: float
    leg: RouteLeg
    wind_summary: WindSummary
    rank: Optional[int] = None

    @property
    def flight_level(self) -> str:
        return f"FL{int(self.altitude_ft) // 100:03d}"

    @property
    def total_time_hr(self) -> float:
        return self.leg.total_time_hr
