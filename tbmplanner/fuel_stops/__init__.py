# tbmplanner/fuel_stops/__init__.py
"""
Fuel-stop planning: corridor search for stop airports, the fuel-safety
model, and the one/two-stop cost and time optimizer.
"""
from .constants import FuelStopConstants
from .data_models import FuelPlanLeg, FuelPlanOption, FuelPlanResult, FuelPrice, FuelStopCandidate
from .exceptions import FuelStopException, NoSafePlanError
from .corridor import CorridorSearch
from .planner import FuelStopPlanner, is_leg_safe, needs_fuel_stop
from .pricing import FuelPriceClient
