# tbmplanner/airplane/exceptions.py

class AircraftException(Exception):
    """Base exception for all aircraft-related errors"""
    pass

class PerformanceTableError(AircraftException):
    """Performance table is malformed (unordered or out of domain)"""
    pass
