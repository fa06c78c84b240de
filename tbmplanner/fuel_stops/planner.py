# tbmplanner/fuel_stops/planner.py
"""
One- and two-stop fuel plan optimizer.

Every (stop combination, cruise altitude) pair is flown through the leg
calculator. Each stop's cross-track distance is charged to both of its
adjacent legs as a detour allowance. A plan is kept only if every leg lands
with at least the minimum reserve, where leg burn uses the two-tier cruise
rate over the whole leg time.
"""
import logging
from itertools import combinations
from typing import Dict, List, Optional, Sequence

from ..airplane.constants import TBM850Constants
from ..airplane.performance import two_tier_burn
from ..airports.data_models import Airport
from ..route.calculator import FlightCalculator
from ..route.data_models import AltitudeOption
from ..route.utils.coordinates import haversine_distance_nm
from .constants import FuelStopConstants
from .data_models import FuelPlanLeg, FuelPlanOption, FuelPlanResult, FuelPrice, FuelStopCandidate
from .exceptions import NoSafePlanError

def needs_fuel_stop(options: Sequence[AltitudeOption],
                    threshold_hr: float = FuelStopConstants.TRIGGER_TIME_HR) -> bool:
    return any(o.leg.total_time_hr >= threshold_hr for o in options)

def is_leg_safe(time_hr: float,
                capacity_gal: float = TBM850Constants.FUEL['USABLE_CAPACITY_GAL'],
                reserve_gal: float = TBM850Constants.FUEL['MIN_LANDING_RESERVE_GAL']) -> bool:
    return capacity_gal - two_tier_burn(time_hr) >= reserve_gal

class FuelStopPlanner:
    def __init__(self, calculator: Optional[FlightCalculator] = None,
                 capacity_gal: float = TBM850Constants.FUEL['USABLE_CAPACITY_GAL'],
                 reserve_gal: float = TBM850Constants.FUEL['MIN_LANDING_RESERVE_GAL'],
                 ground_time_min: float = FuelStopConstants.GROUND_TIME_MIN,
                 min_stop_spacing_nm: float = FuelStopConstants.MIN_STOP_SPACING_NM,
                 default_fuel_price: float = FuelStopConstants.DEFAULT_FUEL_PRICE):
        self.calculator = calculator or FlightCalculator()
        self.capacity_gal = capacity_gal
        self.reserve_gal = reserve_gal
        self.ground_time_min = ground_time_min
        self.min_stop_spacing_nm = min_stop_spacing_nm
        self.default_fuel_price = default_fuel_price

    def plan(self, departure: Airport, destination: Airport,
             candidates: Sequence[FuelStopCandidate], altitudes: Sequence[float],
             ground_speeds: Optional[Dict[float, float]] = None,
             prices: Optional[Dict[str, Optional[FuelPrice]]] = None) -> FuelPlanResult:
        """
        Args:
            candidates: Corridor candidates, typically from CorridorSearch.
            altitudes: Legal cruise altitudes for the route.
            ground_speeds: Optional cruise ground speed per altitude; TAS otherwise.
            prices: Optional fuel price per airport ident.
        """
        ground_speeds = ground_speeds or {}
        prices = prices or {}

        one_stop = []
        for candidate in candidates:
            for altitude in altitudes:
                option = self._evaluate(departure, destination, [candidate], altitude,
                                        ground_speeds.get(altitude), prices)
                if option is not None:
                    one_stop.append(option)

        ordered = sorted(candidates, key=lambda c: c.along_track_nm)
        two_stop = []
        for first, second in combinations(ordered, 2):
            if second.along_track_nm <= first.along_track_nm:
                continue
            spacing = haversine_distance_nm(first.airport.lat, first.airport.lon,
                                            second.airport.lat, second.airport.lon)
            if spacing < self.min_stop_spacing_nm:
                continue
            for altitude in altitudes:
                option = self._evaluate(departure, destination, [first, second], altitude,
                                        ground_speeds.get(altitude), prices)
                if option is not None:
                    two_stop.append(option)

        self._rank(one_stop)
        self._rank(two_stop)
        result = FuelPlanResult(one_stop_options=one_stop, two_stop_options=two_stop,
                                two_stop_required=not one_stop and bool(two_stop),
                                candidate_count=len(candidates))
        if not one_stop and not two_stop:
            result.error = "No safe fuel-stop plan found"
            logging.warning(f"{departure.ident}-{destination.ident}: no safe fuel-stop plan among "
                            f"{len(candidates)} candidates.")
        else:
            logging.info(f"{departure.ident}-{destination.ident}: {len(one_stop)} safe 1-stop and "
                         f"{len(two_stop)} safe 2-stop options.")
        return result

    def plan_or_raise(self, departure: Airport, destination: Airport,
                      candidates: Sequence[FuelStopCandidate], altitudes: Sequence[float],
                      ground_speeds: Optional[Dict[float, float]] = None,
                      prices: Optional[Dict[str, Optional[FuelPrice]]] = None) -> FuelPlanResult:
        result = self.plan(departure, destination, candidates, altitudes, ground_speeds, prices)
        if not result.success:
            raise NoSafePlanError(departure.ident, destination.ident)
        return result

    def _evaluate(self, departure: Airport, destination: Airport, stops: List[FuelStopCandidate],
                  altitude_ft: float, ground_speed_kt: Optional[float],
                  prices: Dict[str, Optional[FuelPrice]]) -> Optional[FuelPlanOption]:
        waypoints = [departure] + [s.airport for s in stops] + [destination]
        detours = [0.0] + [s.cross_track_nm for s in stops] + [0.0]

        legs = []
        for i in range(len(waypoints) - 1):
            leg = self.calculator.compute_leg(waypoints[i], waypoints[i + 1], altitude_ft,
                                              ground_speed_kt=ground_speed_kt,
                                              extra_distance_nm=detours[i] + detours[i + 1])
            burn = two_tier_burn(leg.total_time_hr)
            landing = self.capacity_gal - burn
            if landing < self.reserve_gal:
                return None
            legs.append(FuelPlanLeg(
                origin=waypoints[i].ident,
                destination=waypoints[i + 1].ident,
                distance_nm=leg.distance_nm,
                time_hr=leg.total_time_hr,
                fuel_gal=leg.total_fuel_gal,
                burn_gal=burn,
                landing_fuel_gal=landing,
                is_safe=True,
            ))

        # Top off at each stop with what the inbound leg used.
        fuel_to_buy = total_cost = 0.0
        estimated = False
        for stop, inbound in zip(stops, legs):
            price = prices.get(stop.ident)
            unit = price.effective_price if price is not None else None
            if unit is None:
                unit = self.default_fuel_price
                estimated = True
            fuel_to_buy += inbound.fuel_gal
            total_cost += inbound.fuel_gal * unit

        return FuelPlanOption(
            stops=list(stops),
            legs=legs,
            altitude_ft=altitude_ft,
            total_time_hr=sum(leg.time_hr for leg in legs) + len(stops) * self.ground_time_min / 60,
            total_fuel_gal=sum(leg.fuel_gal for leg in legs),
            fuel_to_buy_gal=fuel_to_buy,
            total_cost=total_cost,
            price_estimated=estimated,
        )

    @staticmethod
    def _rank(options: List[FuelPlanOption]):
        if not options:
            return
        options.sort(key=lambda o: (o.total_time_hr, o.total_cost))
        cheapest = min(options, key=lambda o: (o.total_cost, o.total_time_hr))
        cheapest.tags.append(FuelStopConstants.TAG_CHEAPEST)
        options[0].tags.append(FuelStopConstants.TAG_FASTEST)
