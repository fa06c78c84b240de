# tbmplanner/planner/__init__.py
"""
Initializes the planner module, defining its public API.
"""
from .core import FlightPlanner
from .data_models import PlanResult, PlannerConfig
from .session import PlanningSession
