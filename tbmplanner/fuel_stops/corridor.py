# tbmplanner/fuel_stops/corridor.py
"""
Finds candidate fuel-stop airports in a cross-track corridor around the
great-circle route. Airports too close to departure, or inside the descent
profile at the destination end, are excluded.
"""
import logging
import math
from typing import Iterable, List, Optional

from ..airports.data_models import Airport
from ..airports.directory import AirportDirectory
from ..route.utils.coordinates import (along_track_distance_nm, cross_track_distance_nm,
                                       haversine_distance_nm, route_waypoints)
from .constants import FuelStopConstants
from .data_models import FuelStopCandidate

def is_candidate_airport(airport: Airport) -> bool:
    """Medium/large US airports (four-letter K or P idents)."""
    ident = airport.ident
    return (airport.airport_type in FuelStopConstants.CANDIDATE_TYPES
            and len(ident) == 4
            and ident.startswith(FuelStopConstants.US_IDENT_PREFIXES))

class CorridorSearch:
    def __init__(self, directory: AirportDirectory,
                 corridor_nm: float = FuelStopConstants.CORRIDOR_NM,
                 member_corridor_nm: float = FuelStopConstants.MEMBER_CORRIDOR_NM,
                 min_from_dep_nm: float = FuelStopConstants.MIN_FROM_DEP_NM,
                 descent_buffer_nm: float = FuelStopConstants.DESCENT_BUFFER_NM,
                 max_candidates: int = FuelStopConstants.MAX_CANDIDATES):
        self.directory = directory
        self.corridor_nm = corridor_nm
        self.member_corridor_nm = max(member_corridor_nm, corridor_nm)
        self.min_from_dep_nm = min_from_dep_nm
        self.descent_buffer_nm = descent_buffer_nm
        self.max_candidates = max_candidates

    def _bounding_box(self, departure: Airport, destination: Airport):
        # Sample the arc so the box covers the great-circle bulge too.
        points = route_waypoints(departure.lat, departure.lon, destination.lat, destination.lon)
        lats = [p[0] for p in points]
        lons = [p[1] for p in points]
        margin_lat = self.member_corridor_nm / 60.0
        max_abs_lat = min(89.0, max(abs(l) for l in lats) + margin_lat)
        margin_lon = margin_lat / math.cos(math.radians(max_abs_lat))
        return min(lats) - margin_lat, max(lats) + margin_lat, min(lons) - margin_lon, max(lons) + margin_lon

    def scan(self, departure: Airport, destination: Airport) -> List[FuelStopCandidate]:
        """Every eligible airport inside the widest (member) corridor, unranked."""
        total = haversine_distance_nm(departure.lat, departure.lon, destination.lat, destination.lon)
        min_lat, max_lat, min_lon, max_lon = self._bounding_box(departure, destination)
        excluded = {departure.ident, destination.ident}

        found = []
        for airport in self.directory.scan_bbox(min_lat, max_lat, min_lon, max_lon):
            if airport.ident in excluded or not is_candidate_airport(airport):
                continue
            xt = abs(cross_track_distance_nm(airport.lat, airport.lon, departure.lat, departure.lon,
                                             destination.lat, destination.lon))
            if xt > self.member_corridor_nm:
                continue
            along = along_track_distance_nm(airport.lat, airport.lon, departure.lat, departure.lon,
                                            destination.lat, destination.lon)
            if along < self.min_from_dep_nm or along > total - self.descent_buffer_nm:
                continue
            found.append(FuelStopCandidate(
                airport=airport,
                dist_from_dep_nm=haversine_distance_nm(departure.lat, departure.lon, airport.lat, airport.lon),
                dist_from_dest_nm=haversine_distance_nm(airport.lat, airport.lon, destination.lat, destination.lon),
                along_track_nm=along,
                cross_track_nm=xt,
            ))
        return found

    def select(self, candidates: List[FuelStopCandidate],
               member_idents: Optional[Iterable[str]] = None) -> List[FuelStopCandidate]:
        """
        Applies the per-class corridor width, flags program members and keeps
        the best `max_candidates`: members first, then closest to the route.
        """
        members = {i.upper() for i in (member_idents or ())}
        selected = []
        for candidate in candidates:
            candidate.is_discount_program = candidate.ident in members
            limit = self.member_corridor_nm if candidate.is_discount_program else self.corridor_nm
            if candidate.cross_track_nm <= limit:
                selected.append(candidate)
        selected.sort(key=lambda c: (not c.is_discount_program, c.cross_track_nm))
        return selected[:self.max_candidates]

    def find_candidates(self, departure: Airport, destination: Airport,
                        member_idents: Optional[Iterable[str]] = None) -> List[FuelStopCandidate]:
        candidates = self.select(self.scan(departure, destination), member_idents)
        logging.info(f"Corridor search {departure.ident}-{destination.ident}: {len(candidates)} candidates "
                     f"({sum(c.is_discount_program for c in candidates)} program members).")
        return candidates
