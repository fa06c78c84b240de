# tbmplanner/planner/data_models.py
from dataclasses import dataclass, field
from typing import List, Optional

from ..airports.data_models import Airport
from ..constants.services import ServiceLimits
from ..fuel_stops.constants import FuelStopConstants
from ..fuel_stops.data_models import FuelPlanResult
from ..route.constants import RouteConstants
from ..route.data_models import AltitudeOption

@dataclass
class PlannerConfig:
    """Configuration parameters for one planning request."""
    wind_source: str = "gridded"          # "gridded", "station" or "none"
    forecast_hour: str = "06"             # station bulletin horizon
    request_timeout_sec: float = ServiceLimits.REQUEST_TIMEOUT_SEC
    batch_size: int = ServiceLimits.GFS_BATCH_SIZE
    batch_delay_sec: float = ServiceLimits.GFS_BATCH_DELAY_SEC
    retry_delay_sec: float = ServiceLimits.GFS_RETRY_DELAY_SEC
    route_sample_segments: int = RouteConstants.ROUTE_SAMPLE_SEGMENTS
    cross_track_weighting: bool = False
    wind_correct_phases: bool = True
    max_altitude_options: int = RouteConstants.MAX_ALTITUDE_OPTIONS
    fuel_stop_trigger_hr: float = FuelStopConstants.TRIGGER_TIME_HR
    default_fuel_price: float = FuelStopConstants.DEFAULT_FUEL_PRICE
    fetch_fuel_prices: bool = True

@dataclass
class PlanResult:
    """The final output object of one planning request."""
    departure_code: str
    destination_code: str
    departure: Optional[Airport] = None
    destination: Optional[Airport] = None
    distance_nm: float = 0.0
    true_course_deg: float = 0.0
    magnetic_course_deg: float = 0.0
    altitude_options: List[AltitudeOption] = field(default_factory=list)
    fuel_stop_needed: bool = False
    fuel_plan: Optional[FuelPlanResult] = None
    wind_source: str = "none"
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def best_option(self) -> Optional[AltitudeOption]:
        return self.altitude_options[0] if self.altitude_options else None
