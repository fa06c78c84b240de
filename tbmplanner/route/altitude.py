# tbmplanner/route/altitude.py
"""
IFR cruise altitude selection. Eastbound courses (000-179) fly odd thousands,
westbound courses fly even thousands. Each legal altitude is run through the
leg calculator with its own wind correction and the fastest are kept.
"""
import logging
from typing import List, Optional

from ..airports.data_models import Airport
from ..winds.data_models import RouteWindData
from ..winds.ground_speed import phase_wind_ratio, summarize_winds
from ..winds.route_winds import arrival_profile, departure_profile
from .calculator import FlightCalculator
from .constants import RouteConstants
from .data_models import AltitudeOption
from .utils.coordinates import calculate_bearing

def legal_cruise_altitudes(true_course: float,
                           min_altitude_ft: int = RouteConstants.MIN_CRUISE_ALTITUDE_FT,
                           max_altitude_ft: int = RouteConstants.MAX_CRUISE_ALTITUDE_FT) -> List[int]:
    step = RouteConstants.ALTITUDE_STEP_FT
    eastbound = 0 <= (true_course % 360) < 180
    first = -(-min_altitude_ft // step) * step
    return [alt for alt in range(first, max_altitude_ft + 1, step)
            if ((alt // step) % 2 == 1) == eastbound]

class AltitudeRanker:
    """Ranks legal cruise altitudes for one route by total flight time."""

    def __init__(self, calculator: Optional[FlightCalculator] = None,
                 max_options: int = RouteConstants.MAX_ALTITUDE_OPTIONS,
                 cross_track_weighting: bool = False,
                 wind_correct_phases: bool = True):
        self.calculator = calculator or FlightCalculator()
        self.performance = self.calculator.performance
        self.max_options = max_options
        self.cross_track_weighting = cross_track_weighting
        self.wind_correct_phases = wind_correct_phases

    def evaluate(self, departure: Airport, destination: Airport, altitude_ft: float,
                 route_winds: Optional[RouteWindData] = None) -> AltitudeOption:
        course = calculate_bearing(departure.lat, departure.lon, destination.lat, destination.lon)
        tas = self.performance.cruise_tas(altitude_ft)
        summary = summarize_winds(route_winds, altitude_ft, course, tas, self.cross_track_weighting)

        climb_ratio = descent_ratio = 1.0
        if summary.available and self.wind_correct_phases:
            climb_ratio = phase_wind_ratio(departure_profile(route_winds), departure.elevation_ft, altitude_ft,
                                           course, self.performance.climb_tas, self.performance.rate_of_climb)
            descent_ratio = phase_wind_ratio(arrival_profile(route_winds), destination.elevation_ft, altitude_ft,
                                             course, self.performance.descent_tas, self.performance.descent_rate)

        leg = self.calculator.compute_leg(departure, destination, altitude_ft,
                                          ground_speed_kt=summary.ground_speed_kt,
                                          climb_wind_ratio=climb_ratio,
                                          descent_wind_ratio=descent_ratio)
        return AltitudeOption(altitude_ft=altitude_ft, leg=leg, wind_summary=summary)

    def rank(self, departure: Airport, destination: Airport,
             route_winds: Optional[RouteWindData] = None) -> List[AltitudeOption]:
        """Best `max_options` legal altitudes, fastest first."""
        course = calculate_bearing(departure.lat, departure.lon, destination.lat, destination.lon)
        altitudes = legal_cruise_altitudes(course)
        options = [self.evaluate(departure, destination, alt, route_winds) for alt in altitudes]
        options.sort(key=lambda o: o.leg.total_time_min)
        ranked = options[:self.max_options]
        for i, option in enumerate(ranked, start=1):
            option.rank = i

        if ranked:
            best = ranked[0]
            logging.info(f"{departure.ident}-{destination.ident} ({course:.0f}T): best {best.flight_level} "
                         f"{best.leg.formatted_time}, {best.leg.total_fuel_gal:.0f} gal, "
                         f"{best.wind_summary.description}")
        return ranked

