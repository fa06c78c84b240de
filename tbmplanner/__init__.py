# tbmplanner/__init__.py
"""
Flight planning engine for the TBM 850 single-engine turboprop.

Sub-packages, leaves first:
  route.utils.coordinates - great-circle geometry
  airplane                - book performance model
  winds                   - wind decoders, interpolation and ground-speed integration
  route                   - leg calculator and cruise altitude ranking
  fuel_stops              - corridor search and fuel-stop optimization
  airports                - airport directory collaborator
  planner                 - orchestration of one planning session
"""
__version__ = "0.3.0"
