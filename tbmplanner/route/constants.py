# tbmplanner/route/constants.py

class RouteConstants:
    EARTH_RADIUS_NM: float = 3440.065

    # IFR cruise band evaluated for the airframe (FL240 - FL310)
    MIN_CRUISE_ALTITUDE_FT: int = 24000
    MAX_CRUISE_ALTITUDE_FT: int = 31000
    ALTITUDE_STEP_FT: int = 1000
    MAX_ALTITUDE_OPTIONS: int = 3

    # Route sampling for gridded wind queries (segments, so N+1 points)
    ROUTE_SAMPLE_SEGMENTS: int = 20

    # Linear magnetic variation fit over CONUS, degrees (east positive)
    MAGVAR_LON_COEFF: float = -0.571
    MAGVAR_LAT_COEFF: float = 0.037
    MAGVAR_OFFSET: float = -54.2
