# tbmplanner/constants/services.py

class ServiceEndpoints:
    """Remote data providers consumed by the planner."""

    # NOAA Aviation Weather Center FB winds bulletin, low altitude, CONUS
    WINDS_BULLETIN_URL = "https://aviationweather.gov/api/data/windtemp"
    WINDS_BULLETIN_PARAMS = {"region": "all", "level": "low"}

    # NOMADS GrADS Data Server, GFS 0.25 degree pressure-level output
    GFS_DODS_BASE_URL = "https://nomads.ncep.noaa.gov/dods/gfs_0p25"

    # Fuel price lookup, returns {"fbo", "retailPrice", "memberPrice"} per airport
    FUEL_PRICE_URL = "https://fuel.tbmplanner.net/price"

class ServiceLimits:
    """Rate limiting and timeout policy for remote calls."""

    REQUEST_TIMEOUT_SEC = 15
    GFS_BATCH_SIZE = 5
    GFS_BATCH_DELAY_SEC = 0.4
    GFS_RETRY_DELAY_SEC = 0.8
    GFS_RETRY_SPACING_SEC = 0.3
    FUEL_PRICE_WORKERS = 8
    HTTP_RETRIES = 2
    HTTP_BACKOFF_FACTOR = 0.2
