# tbmplanner/winds/__init__.py
"""
Upper-air winds: two independent decoders (station bulletin and gridded
model point response) producing one WindSample/WindProfile contract, altitude
interpolation, and the segment-weighted ground-speed integrator.
"""
from .data_models import (GroundSpeedResult, RouteWindData, RouteWindPoint, WindProfile,
                          WindSample, WindSummary)
from .exceptions import PlanCancelledError, WindDataError, WindFetchError, WindParseError
from .station_decoder import decode_wind_entry, parse_bulletin
from .gridded_decoder import decode_point_response, uv_to_wind
from .interpolation import interpolate_direction, wind_at_altitude
from .ground_speed import (effective_ground_speed, phase_wind_ratio, summarize_winds,
                           wind_components, wind_triangle_ground_speed)
