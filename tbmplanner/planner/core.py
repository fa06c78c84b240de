# tbmplanner/planner/core.py
"""
The core orchestrator for one flight plan. It resolves the airports, gathers
winds from the configured provider, ranks cruise altitudes and, when the
trip is too long for one leg, plans fuel stops.

Missing wind or price data never fails a plan; it degrades to still air and
estimated prices. An unknown airport does fail it.
"""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from ..airplane.performance import PerformanceModel
from ..airports.data_models import Airport
from ..airports.directory import AirportDirectory
from ..fuel_stops.corridor import CorridorSearch
from ..fuel_stops.data_models import FuelPlanResult
from ..fuel_stops.planner import FuelStopPlanner, needs_fuel_stop
from ..fuel_stops.pricing import FuelPriceClient
from ..route.altitude import AltitudeRanker, legal_cruise_altitudes
from ..route.calculator import FlightCalculator
from ..route.utils.coordinates import (calculate_bearing, estimate_magnetic_variation,
                                       haversine_distance_nm, true_to_magnetic)
from ..winds.data_models import RouteWindData
from ..winds.exceptions import PlanCancelledError, WindDataError
from ..winds.fetchers import GriddedWindClient, StationBulletinClient
from ..winds.ground_speed import summarize_winds
from ..winds.route_winds import build_station_route_winds
from .data_models import PlanResult, PlannerConfig
from .session import PlanningSession

class FlightPlanner:
    """Main class to plan a flight between two airports."""
    def __init__(self, directory: AirportDirectory, config: Optional[PlannerConfig] = None,
                 performance: Optional[PerformanceModel] = None,
                 gridded_client: Optional[GriddedWindClient] = None,
                 bulletin_client: Optional[StationBulletinClient] = None,
                 price_client: Optional[FuelPriceClient] = None):
        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

        self.config = config or PlannerConfig()
        self.directory = directory
        self.calculator = FlightCalculator(performance)
        self.ranker = AltitudeRanker(
            self.calculator,
            max_options=self.config.max_altitude_options,
            cross_track_weighting=self.config.cross_track_weighting,
            wind_correct_phases=self.config.wind_correct_phases,
        )
        self.corridor = CorridorSearch(directory)
        self.fuel_planner = FuelStopPlanner(self.calculator, default_fuel_price=self.config.default_fuel_price)
        self._gridded_client = gridded_client
        self._bulletin_client = bulletin_client
        self._price_client = price_client
        logging.info(f"FlightPlanner initialized. Wind source: {self.config.wind_source}")

    def plan(self, departure_code: str, destination_code: str,
             departure_time: Optional[datetime] = None,
             session: Optional[PlanningSession] = None) -> PlanResult:
        """The main operational method to run a complete plan."""
        session = session or PlanningSession()
        result = PlanResult(departure_code=departure_code, destination_code=destination_code)

        for code in (departure_code, destination_code):
            if self.directory.lookup(code) is None:
                result.error = f"No such airport: {code}"
                logging.error(result.error)
                return result
        departure = self.directory.lookup(departure_code)
        destination = self.directory.lookup(destination_code)

        result.departure, result.destination = departure, destination
        result.distance_nm = haversine_distance_nm(departure.lat, departure.lon, destination.lat, destination.lon)
        result.true_course_deg = calculate_bearing(departure.lat, departure.lon, destination.lat, destination.lon)
        result.magnetic_course_deg = true_to_magnetic(
            result.true_course_deg, estimate_magnetic_variation(departure.lat, departure.lon))

        try:
            route_winds = self._route_winds(departure, destination, departure_time, session)
            result.wind_source = route_winds.source if route_winds else "none"
            result.altitude_options = self.ranker.rank(departure, destination, route_winds)

            if needs_fuel_stop(result.altitude_options, self.config.fuel_stop_trigger_hr):
                result.fuel_stop_needed = True
                result.fuel_plan = self._plan_fuel_stops(departure, destination, route_winds, session)
        except PlanCancelledError as e:
            logging.warning(f"{departure.ident}-{destination.ident}: {e}")
            result.altitude_options = []
            result.fuel_plan = None
            result.error = "Planning cancelled"
            return result

        logging.info(f"Plan complete: {departure.ident}-{destination.ident} {result.distance_nm:.0f} NM, "
                     f"{len(result.altitude_options)} altitude options, fuel stop needed: {result.fuel_stop_needed}")
        return result

    # --- Wind acquisition ---

    def _gridded(self) -> GriddedWindClient:
        if self._gridded_client is None:
            self._gridded_client = GriddedWindClient(
                timeout=self.config.request_timeout_sec,
                batch_size=self.config.batch_size,
                batch_delay_sec=self.config.batch_delay_sec,
                retry_delay_sec=self.config.retry_delay_sec,
                num_segments=self.config.route_sample_segments,
            )
        return self._gridded_client

    def _bulletin(self) -> StationBulletinClient:
        if self._bulletin_client is None:
            self._bulletin_client = StationBulletinClient(timeout=self.config.request_timeout_sec)
        return self._bulletin_client

    def _route_winds(self, departure: Airport, destination: Airport, departure_time: Optional[datetime],
                     session: PlanningSession) -> Optional[RouteWindData]:
        source = self.config.wind_source
        if source == "none":
            return None
        try:
            if source == "gridded":
                return self._gridded().fetch_route_winds(
                    departure.lat, departure.lon, destination.lat, destination.lon,
                    valid_time=departure_time, cancel_event=session.cancel_event, cache=session.wind_cache)
            if source == "station":
                profiles = self._bulletin().fetch_profiles(self.config.forecast_hour, cache=session.wind_cache)
                if session.cancelled:
                    raise PlanCancelledError("Planning session was cancelled during wind fetch")
                if not profiles:
                    return None
                return build_station_route_winds(profiles, departure.lat, departure.lon,
                                                 destination.lat, destination.lon)
        except PlanCancelledError:
            raise
        except WindDataError as e:
            logging.warning(f"Wind data unavailable, planning in still air: {e}")
            return None
        logging.warning(f"Unknown wind source '{source}', planning in still air.")
        return None

    # --- Fuel stops ---

    def _plan_fuel_stops(self, departure: Airport, destination: Airport,
                         route_winds: Optional[RouteWindData], session: PlanningSession) -> FuelPlanResult:
        scanned = self.corridor.scan(departure, destination)
        prices: Dict = {}
        if self.config.fetch_fuel_prices and scanned:
            if session.cancelled:
                raise PlanCancelledError("Planning session was cancelled before fuel price lookup")
            if self._price_client is None:
                self._price_client = FuelPriceClient(timeout=self.config.request_timeout_sec)
            prices = self._price_client.lookup_many([c.ident for c in scanned], cache=session.fuel_price_cache)
        if session.cancelled:
            raise PlanCancelledError("Planning session was cancelled during fuel price lookup")

        members = [ident for ident, price in prices.items() if price is not None and price.is_member]
        candidates = self.corridor.select(scanned, members)
        logging.info(f"Fuel-stop candidates: {', '.join(c.ident for c in candidates) or 'none'}")

        course = calculate_bearing(departure.lat, departure.lon, destination.lat, destination.lon)
        altitudes = legal_cruise_altitudes(course)
        ground_speeds = self._ground_speeds(altitudes, course, route_winds)
        return self.fuel_planner.plan(departure, destination, candidates, altitudes, ground_speeds, prices)

    def _ground_speeds(self, altitudes: List[int], course: float,
                       route_winds: Optional[RouteWindData]) -> Dict[float, float]:
        performance = self.calculator.performance
        return {alt: summarize_winds(route_winds, alt, course, performance.cruise_tas(alt),
                                     self.config.cross_track_weighting).ground_speed_kt
                for alt in altitudes}
