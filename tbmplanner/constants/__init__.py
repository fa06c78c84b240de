# tbmplanner/constants/__init__.py
from .services import ServiceEndpoints, ServiceLimits
