# tbmplanner/airports/directory.py
"""
In-memory airport directory built from the OurAirports CSV layout
(ident, name, latitude_deg, longitude_deg, elevation_ft, type, municipality,
iso_region, gps_code, iata_code, local_code).

Every airport is indexed under each of its code aliases so that "DEN",
"KDEN" and a local FAA identifier all resolve to the same record.
"""
import io
import logging
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .data_models import Airport
from .exceptions import AirportDirectoryError, AirportNotFoundError

# Airport classes a planner would ever route through
SUPPORTED_TYPES = ("small_airport", "medium_airport", "large_airport")
CODE_COLUMNS = ('ident', 'gps_code', 'iata_code', 'local_code')
AIRPORT_COLUMNS = CODE_COLUMNS + ('type', 'name', 'latitude_deg', 'longitude_deg',
                                  'elevation_ft', 'municipality', 'iso_region')

def _read_airports(source, label: str) -> pd.DataFrame:
    # All text, blanks kept as '' so codes like "NA" or "00C" survive as written
    try:
        return pd.read_csv(source, dtype=str, keep_default_na=False)
    except OSError as e:
        raise AirportDirectoryError(f"Could not read airport file {label}: {e}") from e
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise AirportDirectoryError(f"Airport data in {label} is not a usable CSV: {e}") from e

class AirportDirectory:
    """Alias-indexed airport lookup with a bounding-box corridor scan."""

    def __init__(self, airports: Iterable[Airport]):
        self.airports: List[Airport] = list(airports)
        self._index: Dict[str, Airport] = {}
        for airport in self.airports:
            self._register(airport)
        logging.info(f"AirportDirectory initialized with {len(self.airports)} airports.")

    def _register(self, airport: Airport):
        # The primary ident always wins over an alias of another airport.
        self._index[airport.ident.upper()] = airport
        for alias in (airport.gps_code, airport.iata_code, airport.local_code):
            if alias:
                self._index.setdefault(alias.upper(), airport)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "AirportDirectory":
        """
        Builds the directory from an OurAirports-style DataFrame read with
        every column as text. Rows without usable coordinates are dropped and
        a blank elevation reads as 0 ft.
        """
        df = df.copy()
        for col in AIRPORT_COLUMNS:
            if col not in df.columns:
                df[col] = ''
        df = df[df['type'].isin(SUPPORTED_TYPES)].copy()
        df['latitude_deg'] = pd.to_numeric(df['latitude_deg'], errors='coerce')
        df['longitude_deg'] = pd.to_numeric(df['longitude_deg'], errors='coerce')
        df = df.dropna(subset=['latitude_deg', 'longitude_deg']).copy()
        df['elevation_ft'] = pd.to_numeric(df['elevation_ft'], errors='coerce').fillna(0)
        for col in CODE_COLUMNS:
            df[col] = df[col].astype(str).str.strip().str.upper()

        airports = [
            Airport(
                ident=row.ident,
                lat=float(row.latitude_deg),
                lon=float(row.longitude_deg),
                elevation_ft=float(row.elevation_ft),
                name=row.name,
                municipality=row.municipality,
                region=row.iso_region,
                airport_type=row.type,
                gps_code=row.gps_code or None,
                iata_code=row.iata_code or None,
                local_code=row.local_code or None,
            )
            for row in df.itertuples(index=False)
        ]
        return cls(airports)

    @classmethod
    def from_csv_text(cls, text: str) -> "AirportDirectory":
        return cls.from_frame(_read_airports(io.StringIO(text), "<text>"))

    @classmethod
    def from_csv(cls, path: str) -> "AirportDirectory":
        return cls.from_frame(_read_airports(path, path))

    def lookup(self, code: str) -> Optional[Airport]:
        """Resolve an ident, ICAO/GPS, IATA or local code. None when unknown."""
        if not code:
            return None
        return self._index.get(code.strip().upper())

    def require(self, code: str) -> Airport:
        airport = self.lookup(code)
        if airport is None:
            raise AirportNotFoundError(code)
        return airport

    def scan_bbox(self, min_lat: float, max_lat: float, min_lon: float, max_lon: float) -> List[Airport]:
        return [a for a in self.airports
                if min_lat <= a.lat <= max_lat and min_lon <= a.lon <= max_lon]

    def search(self, query: str, limit: int = 10) -> List[Airport]:
        """Exact code matches first, then code prefixes, then name/city substrings."""
        q = (query or '').strip().upper()
        if not q:
            return []
        exact, prefix, contains = [], [], []
        seen = set()
        for airport in self.airports:
            codes = [c.upper() for c in (airport.ident, airport.gps_code, airport.iata_code, airport.local_code) if c]
            if q in codes:
                bucket = exact
            elif any(c.startswith(q) for c in codes):
                bucket = prefix
            elif q in airport.name.upper() or q in airport.municipality.upper():
                bucket = contains
            else:
                continue
            if airport.ident not in seen:
                seen.add(airport.ident)
                bucket.append(airport)
        return (exact + prefix + contains)[:limit]

    def __len__(self) -> int:
        return len(self.airports)
