# tbmplanner/airports/exceptions.py

class AirportDirectoryError(Exception):
    """Base exception for airport directory errors"""
    pass

class AirportNotFoundError(AirportDirectoryError):
    """No airport matches the requested code"""
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"No such airport: {code}")
