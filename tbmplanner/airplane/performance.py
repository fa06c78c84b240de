# tbmplanner/airplane/performance.py
"""
Altitude-indexed performance model.

Table values are interpolated linearly between adjacent rows; outside the
table the boundary row is held (no extrapolation). Climb and descent are
integrated in fixed altitude bands evaluated at the band midpoint, then
corrected by empirical factors that reconcile book figures with what the
airplane actually does.
"""
import logging
from typing import Callable, Iterable, Optional, Sequence

import numpy as np

from .constants import TBM850Constants
from .data_models import PerformanceRow, PhaseResult
from .exceptions import PerformanceTableError

MAX_TABLE_ALTITUDE_FT = 31000

def two_tier_burn(time_hr: float,
                  first_hour_gph: float = TBM850Constants.FUEL['FIRST_HOUR_GPH'],
                  subsequent_gph: float = TBM850Constants.FUEL['SUBSEQUENT_GPH']) -> float:
    """Fuel for `time_hr` hours: the first hour at the higher rate, the rest at the lower."""
    if time_hr <= 0:
        return 0.0
    return first_hour_gph * min(time_hr, 1.0) + subsequent_gph * max(time_hr - 1.0, 0.0)

class PerformanceModel:
    """Interpolated book performance for one airframe."""

    _COLUMNS = ('climb_ias_kt', 'rate_of_climb_fpm', 'cruise_tas_kt',
                'cruise_fuel_flow_gph', 'descent_ias_kt')

    def __init__(self, table: Optional[Iterable[Sequence[float]]] = None):
        rows = [PerformanceRow(*map(float, r)) for r in (table if table is not None else TBM850Constants.PERFORMANCE_TABLE)]
        self._validate(rows)
        self.rows = rows
        self._altitudes = np.array([r.altitude_ft for r in rows], dtype=float)
        self._values = {name: np.array([getattr(r, name) for r in rows], dtype=float)
                        for name in self._COLUMNS}

        climb, descent = TBM850Constants.CLIMB, TBM850Constants.DESCENT
        self._climb_flow = self._linear(climb['FUEL_FLOW_LOW'], climb['FUEL_FLOW_HIGH'])
        self._descent_flow = self._linear(descent['FUEL_FLOW_LOW'], descent['FUEL_FLOW_HIGH'])
        logging.debug(f"PerformanceModel initialized with {len(rows)} rows "
                      f"({rows[0].altitude_ft:.0f}-{rows[-1].altitude_ft:.0f} ft).")

    @staticmethod
    def _validate(rows):
        if not rows:
            raise PerformanceTableError("Performance table is empty")
        for prev, cur in zip(rows, rows[1:]):
            if cur.altitude_ft <= prev.altitude_ft:
                raise PerformanceTableError(
                    f"Table altitudes must be strictly increasing ({prev.altitude_ft} -> {cur.altitude_ft})")
        if rows[0].altitude_ft < 0 or rows[-1].altitude_ft > MAX_TABLE_ALTITUDE_FT:
            raise PerformanceTableError(f"Table must lie within 0-{MAX_TABLE_ALTITUDE_FT} ft")
        if any(r.rate_of_climb_fpm <= 0 for r in rows):
            raise PerformanceTableError("Rate of climb must be positive at every row")

    @staticmethod
    def _linear(low, high) -> Callable[[float], float]:
        xs, ys = (low[0], high[0]), (low[1], high[1])
        return lambda alt: float(np.interp(alt, xs, ys))

    def _interp(self, name: str, altitude_ft: float) -> float:
        return float(np.interp(altitude_ft, self._altitudes, self._values[name]))

    def at_altitude(self, altitude_ft: float) -> PerformanceRow:
        return PerformanceRow(altitude_ft, *(self._interp(name, altitude_ft) for name in self._COLUMNS))

    def cruise_tas(self, altitude_ft: float) -> float:
        return self._interp('cruise_tas_kt', altitude_ft)

    def rate_of_climb(self, altitude_ft: float) -> float:
        return self._interp('rate_of_climb_fpm', altitude_ft)

    def descent_rate(self, altitude_ft: float) -> float:
        d = TBM850Constants.DESCENT
        rate = self._interp('descent_ias_kt', altitude_ft) * d['RATE_PER_KIAS']
        return min(d['MAX_RATE_FPM'], max(d['MIN_RATE_FPM'], rate))

    def climb_tas(self, altitude_ft: float) -> float:
        """True airspeed flown in the climb, for wind correction."""
        return self._lookup(TBM850Constants.CLIMB_TAS_BY_ALT, altitude_ft)

    def descent_tas(self, altitude_ft: float) -> float:
        return self._lookup(TBM850Constants.DESCENT_TAS_BY_ALT, altitude_ft)

    @staticmethod
    def _lookup(table, altitude_ft: float) -> float:
        altitudes = sorted(table)
        return float(np.interp(altitude_ft, altitudes, [table[a] for a in altitudes]))

    def climb(self, field_elevation_ft: float, cruise_altitude_ft: float) -> PhaseResult:
        """Time, fuel and distance from the departure field to cruise altitude."""
        if cruise_altitude_ft <= field_elevation_ft:
            return PhaseResult.zero()
        raw = self._integrate(
            field_elevation_ft, cruise_altitude_ft, TBM850Constants.CLIMB['BAND_FT'],
            rate=self.rate_of_climb,
            flow=self._climb_flow,
            speed=lambda alt: self._interp('climb_ias_kt', alt),
        )
        return raw.scaled(TBM850Constants.CLIMB['CORRECTION_FACTOR'])

    def descent(self, cruise_altitude_ft: float, field_elevation_ft: float) -> PhaseResult:
        """Time, fuel and distance from cruise altitude down to the destination field."""
        if cruise_altitude_ft <= field_elevation_ft:
            return PhaseResult.zero()
        raw = self._integrate(
            field_elevation_ft, cruise_altitude_ft, TBM850Constants.DESCENT['BAND_FT'],
            rate=self.descent_rate,
            flow=self._descent_flow,
            speed=lambda alt: self._interp('descent_ias_kt', alt),
        )
        return raw.scaled(TBM850Constants.DESCENT['CORRECTION_FACTOR'])

    def cruise_fuel(self, time_hr: float) -> float:
        return two_tier_burn(time_hr)

    @staticmethod
    def _integrate(low_ft: float, high_ft: float, band_ft: float,
                   rate: Callable[[float], float],
                   flow: Callable[[float], float],
                   speed: Callable[[float], float]) -> PhaseResult:
        time_min = fuel_gal = dist_nm = 0.0
        alt = low_ft
        while alt < high_ft:
            step = min(band_ft, high_ft - alt)
            mid = alt + step / 2
            dt_min = step / rate(mid)
            time_min += dt_min
            fuel_gal += flow(mid) * dt_min / 60
            dist_nm += speed(mid) * dt_min / 60
            alt += step
        return PhaseResult(time_min, fuel_gal, dist_nm)
