# tbmplanner/airports/data_models.py
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Airport:
    """An airport as the planner sees it. Immutable once loaded."""
    ident: str
    lat: float
    lon: float
    elevation_ft: float = 0.0
    name: str = ""
    municipality: str = ""
    region: str = ""
    airport_type: str = ""
    gps_code: Optional[str] = None
    iata_code: Optional[str] = None
    local_code: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.municipality:
            return f"{self.ident} - {self.name} ({self.municipality})"
        return f"{self.ident} - {self.name}" if self.name else self.ident
