# tbmplanner/fuel_stops/data_models.py
"""
Candidates produced by the corridor search and the options the optimizer
returns. Output-only; nothing here is persisted.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..airports.data_models import Airport

@dataclass(frozen=True)
class FuelPrice:
    ident: str
    fbo: str
    retail_price: Optional[float]
    member_price: Optional[float] = None
    source: str = "retail"

    @property
    def is_member(self) -> bool:
        return self.member_price is not None

    @property
    def effective_price(self) -> Optional[float]:
        """Member price when available, retail otherwise."""
        return self.member_price if self.member_price is not None else self.retail_price

@dataclass
class FuelStopCandidate:
    airport: Airport
    dist_from_dep_nm: float
    dist_from_dest_nm: float
    along_track_nm: float
    cross_track_nm: float
    is_discount_program: bool = False

    @property
    def ident(self) -> str:
        return self.airport.ident

@dataclass
class FuelPlanLeg:
    origin: str
    destination: str
    distance_nm: float
    time_hr: float
    fuel_gal: float
    burn_gal: float
    landing_fuel_gal: float
    is_safe: bool

@dataclass
class FuelPlanOption:
    stops: List[FuelStopCandidate]
    legs: List[FuelPlanLeg]
    altitude_ft: float
    total_time_hr: float
    total_fuel_gal: float
    fuel_to_buy_gal: float
    total_cost: float
    price_estimated: bool = False
    tags: List[str] = field(default_factory=list)

    @property
    def num_stops(self) -> int:
        return len(self.stops)

    @property
    def route_label(self) -> str:
        idents = [self.legs[0].origin] + [leg.destination for leg in self.legs] if self.legs else []
        return " -> ".join(idents)

@dataclass
class FuelPlanResult:
    one_stop_options: List[FuelPlanOption] = field(default_factory=list)
    two_stop_options: List[FuelPlanOption] = field(default_factory=list)
    two_stop_required: bool = False
    candidate_count: int = 0
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @staticmethod
    def _cheapest(options: List[FuelPlanOption]) -> Optional[FuelPlanOption]:
        return min(options, key=lambda o: (o.total_cost, o.total_time_hr)) if options else None

    @staticmethod
    def _fastest(options: List[FuelPlanOption]) -> Optional[FuelPlanOption]:
        return min(options, key=lambda o: (o.total_time_hr, o.total_cost)) if options else None

    @property
    def cheapest_one_stop(self) -> Optional[FuelPlanOption]:
        return self._cheapest(self.one_stop_options)

    @property
    def fastest_one_stop(self) -> Optional[FuelPlanOption]:
        return self._fastest(self.one_stop_options)

    @property
    def cheapest_two_stop(self) -> Optional[FuelPlanOption]:
        return self._cheapest(self.two_stop_options)

    @property
    def fastest_two_stop(self) -> Optional[FuelPlanOption]:
        return self._fastest(self.two_stop_options)

    def all_options(self) -> List[FuelPlanOption]:
        return self.one_stop_options + self.two_stop_options
