# tbmplanner/airplane/data_models.py
from dataclasses import dataclass

@dataclass(frozen=True)
class PerformanceRow:
    """Book performance at one altitude."""
    altitude_ft: float
    climb_ias_kt: float
    rate_of_climb_fpm: float
    cruise_tas_kt: float
    cruise_fuel_flow_gph: float
    descent_ias_kt: float

@dataclass(frozen=True)
class PhaseResult:
    """Time, fuel and distance of one flight phase."""
    time_min: float
    fuel_gal: float
    distance_nm: float

    @classmethod
    def zero(cls) -> "PhaseResult":
        return cls(0.0, 0.0, 0.0)

    def scaled(self, factor: float) -> "PhaseResult":
        return PhaseResult(self.time_min * factor, self.fuel_gal * factor, self.distance_nm * factor)
