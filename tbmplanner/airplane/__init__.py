# tbmplanner/airplane/__init__.py
"""
Book performance model for the TBM 850: table interpolation, banded
climb/descent integration and two-tier cruise fuel burn.
"""
from .constants import TBM850Constants
from .data_models import PerformanceRow, PhaseResult
from .exceptions import AircraftException, PerformanceTableError
from .performance import PerformanceModel, two_tier_burn
