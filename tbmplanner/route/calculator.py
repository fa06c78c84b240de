# tbmplanner/route/calculator.py
"""
Composes climb, cruise and descent into one leg's time, fuel and distance.
Always produces a result; degenerate inputs produce a degenerate leg.
"""
import logging
from typing import Optional

from ..airplane.constants import TBM850Constants
from ..airplane.data_models import PhaseResult
from ..airplane.performance import PerformanceModel
from ..airports.data_models import Airport
from .data_models import RouteLeg
from .utils.coordinates import calculate_bearing, haversine_distance_nm

class FlightCalculator:
    """Single-leg climb/cruise/descent calculator."""

    def __init__(self, performance: Optional[PerformanceModel] = None,
                 taxi_fuel_gal: float = TBM850Constants.FUEL['TAXI_FUEL_GAL']):
        self.performance = performance or PerformanceModel()
        self.taxi_fuel_gal = taxi_fuel_gal

    def compute_leg(self, departure: Airport, destination: Airport, cruise_altitude_ft: float,
                    ground_speed_kt: Optional[float] = None,
                    climb_wind_ratio: float = 1.0,
                    descent_wind_ratio: float = 1.0,
                    extra_distance_nm: float = 0.0) -> RouteLeg:
        """
        Args:
            ground_speed_kt: Cruise ground speed; book TAS when None or not positive.
            climb_wind_ratio: Ground/air distance ratio through the climb.
            descent_wind_ratio: Ground/air distance ratio through the descent.
            extra_distance_nm: Added to the great-circle distance (detour allowance).
        """
        distance = haversine_distance_nm(departure.lat, departure.lon, destination.lat, destination.lon)
        distance += max(0.0, extra_distance_nm)
        course = calculate_bearing(departure.lat, departure.lon, destination.lat, destination.lon)
        tas = self.performance.at_altitude(cruise_altitude_ft).cruise_tas_kt
        gs = ground_speed_kt if ground_speed_kt is not None and ground_speed_kt > 0 else tas

        if distance <= 0:
            zero = PhaseResult.zero()
            return RouteLeg(departure, destination, cruise_altitude_ft, 0.0, course,
                            zero, zero, zero, tas, gs, self.taxi_fuel_gal)

        climb = self.performance.climb(departure.elevation_ft, cruise_altitude_ft)
        descent = self.performance.descent(cruise_altitude_ft, destination.elevation_ft)
        climb = PhaseResult(climb.time_min, climb.fuel_gal, climb.distance_nm * climb_wind_ratio)
        descent = PhaseResult(descent.time_min, descent.fuel_gal, descent.distance_nm * descent_wind_ratio)

        transition = climb.distance_nm + descent.distance_nm
        if transition > distance:
            # Too short to reach cruise: pro-rate climb and descent to fit.
            factor = distance / transition
            climb, descent = climb.scaled(factor), descent.scaled(factor)
            logging.debug(f"{departure.ident}-{destination.ident} at {cruise_altitude_ft:.0f} ft: "
                          f"climb/descent scaled by {factor:.2f} to fit {distance:.0f} NM")

        cruise_dist = max(0.0, distance - climb.distance_nm - descent.distance_nm)
        cruise_hr = cruise_dist / gs
        cruise = PhaseResult(cruise_hr * 60, self.performance.cruise_fuel(cruise_hr), cruise_dist)

        return RouteLeg(
            departure=departure,
            destination=destination,
            cruise_altitude_ft=cruise_altitude_ft,
            distance_nm=distance,
            true_course_deg=course,
            climb=climb,
            cruise=cruise,
            descent=descent,
            cruise_tas_kt=tas,
            ground_speed_kt=gs,
            taxi_fuel_gal=self.taxi_fuel_gal,
        )
