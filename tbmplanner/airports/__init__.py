# tbmplanner/airports/__init__.py
"""
Airport directory collaborator: lookup by any code alias and corridor scans
by bounding box. The planner only consumes this contract.
"""
from .data_models import Airport
from .directory import AirportDirectory
from .exceptions import AirportDirectoryError, AirportNotFoundError
