# tbmplanner/winds/exceptions.py

class WindDataError(Exception):
    """Base exception for wind data errors"""
    pass

class WindParseError(WindDataError):
    """Bulletin or point response could not be decoded"""
    pass

class WindFetchError(WindDataError):
    """Wind provider request was invalid or failed"""
    pass

class PlanCancelledError(WindDataError):
    """The planning session was cancelled while data was in flight"""
    pass
