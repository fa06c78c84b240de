# tbmplanner/fuel_stops/constants.py

class FuelStopConstants:
    # Any ranked altitude at or beyond this triggers a fuel-stop search
    TRIGGER_TIME_HR: float = 3.5

    # Corridor search
    CORRIDOR_NM: float = 30.0
    MEMBER_CORRIDOR_NM: float = 50.0
    MIN_FROM_DEP_NM: float = 200.0
    DESCENT_BUFFER_NM: float = 60.0
    MAX_CANDIDATES: int = 12
    CANDIDATE_TYPES = ("medium_airport", "large_airport")
    US_IDENT_PREFIXES = ("K", "P")

    # Two-stop combinations
    MIN_STOP_SPACING_NM: float = 200.0

    # Turnaround on the ground per stop
    GROUND_TIME_MIN: float = 45.0

    # Used when an FBO has no published price
    DEFAULT_FUEL_PRICE: float = 7.00

    TAG_CHEAPEST = "Cheapest"
    TAG_FASTEST = "Fastest"
