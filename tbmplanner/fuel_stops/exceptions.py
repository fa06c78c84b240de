# tbmplanner/fuel_stops/exceptions.py

class FuelStopException(Exception):
    """Base exception for fuel-stop planning errors"""
    pass

class NoSafePlanError(FuelStopException):
    """The route exceeds safe range even with two stops"""
    def __init__(self, departure: str, destination: str):
        self.departure = departure
        self.destination = destination
        super().__init__(f"No safe fuel-stop plan found for {departure}-{destination}")
