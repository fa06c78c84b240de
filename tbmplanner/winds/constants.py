# tbmplanner/winds/constants.py

class WindConstants:
    KT_PER_MS: float = 1.94384
    FILL_VALUE_THRESHOLD: float = 9e19

    BULLETIN_FORECAST_HOURS = ("06", "12", "24")
    # Above this altitude temperatures are always negative and printed unsigned
    NEGATIVE_TEMP_ALTITUDE_FT: int = 24000
    LIGHT_AND_VARIABLE = "9900"
    HIGH_SPEED_DIRECTION_OFFSET: int = 50
    HIGH_SPEED_SPEED_BONUS: int = 100
    # Nearest-position column matching tolerance, characters
    MAX_COLUMN_ERROR: int = 3

    # Stations further than this from the route centerline are ignored
    MAX_STATION_CROSS_TRACK_NM: float = 150.0
    STATION_ROUTE_OVERRUN_NM: float = 50.0

    # GFS 0.25 degree grid and pressure levels (lev index -> mb)
    GFS_GRID_RES_DEG: float = 0.25
    GFS_LEVEL_OFFSET: int = 8
    GFS_LEVEL_RANGE = (8, 18)
    GFS_LEVEL_PRESSURES = {
        8: 700, 9: 650, 10: 600, 11: 550, 12: 500, 13: 450,
        14: 400, 15: 350, 16: 300, 17: 250, 18: 200,
    }
    GFS_CYCLES = (18, 12, 6, 0)
    GFS_AVAILABILITY_LAG_HR: int = 5
    GFS_MAX_FORECAST_HR: int = 384
    GFS_FORECAST_STEP_HR: int = 3
    GFS_ERROR_MARKERS = ("GrADS Data Server - error", "<html", "not an available")

    # Standard atmosphere pressure-altitude conversion
    STD_PRESSURE_MB: float = 1013.25
    STD_EXPONENT: float = 0.190284
    STD_SCALE_FT: float = 145366.45

    # Segment weighting: weight = 1 / (1 + xt / scale)
    CROSS_TRACK_WEIGHT_SCALE_NM: float = 50.0

    # Climb/descent wind correction
    PHASE_BAND_FT: int = 2000
    PHASE_RATIO_LIMITS = (0.5, 1.5)
    PHASE_PROFILE_POINTS: int = 3

    # Wind triangle floor
    MIN_GROUND_SPEED_KT: float = 50.0
    CALM_THRESHOLD_KT: float = 2.0

# NOAA FB winds reporting stations, CONUS
NOAA_WIND_STATIONS = {
    'ABQ': (35.04, -106.61),  # Albuquerque NM
    'ABR': (45.45, -98.42),  # Aberdeen SD
    'ABI': (32.41, -99.68),  # Abilene TX
    'ALB': (42.75, -73.80),  # Albany NY
    'ALS': (37.44, -105.87),  # Alamosa CO
    'AMA': (35.22, -101.71),  # Amarillo TX
    'AUS': (30.19, -97.67),  # Austin TX
    'BFF': (41.89, -103.48),  # Scottsbluff NE
    'BIL': (45.81, -108.54),  # Billings MT
    'BIS': (46.77, -100.75),  # Bismarck ND
    'BNA': (36.12, -86.68),  # Nashville TN
    'BOI': (43.57, -116.22),  # Boise ID
    'BRO': (25.91, -97.42),  # Brownsville TX
    'BUF': (42.94, -78.74),  # Buffalo NY
    'CAR': (46.87, -68.02),  # Caribou ME
    'CHI': (41.98, -87.90),  # Chicago IL (same as ORD area)
    'CHS': (32.90, -80.04),  # Charleston SC
    'CLE': (41.41, -81.85),  # Cleveland OH
    'CRP': (27.77, -97.50),  # Corpus Christi TX
    'CVG': (39.05, -84.67),  # Cincinnati/Covington KY
    'DAL': (32.85, -96.85),  # Dallas TX
    'DDC': (37.77, -99.97),  # Dodge City KS
    'DEN': (39.86, -104.67),  # Denver CO
    'DLH': (46.84, -92.19),  # Duluth MN
    'DRT': (29.37, -100.93),  # Del Rio TX
    'DSM': (41.53, -93.66),  # Des Moines IA
    'ELP': (31.81, -106.38),  # El Paso TX
    'EYW': (24.56, -81.76),  # Key West FL
    'FAT': (36.78, -119.72),  # Fresno CA
    'FLG': (35.14, -111.67),  # Flagstaff AZ
    'FMN': (36.74, -108.23),  # Farmington NM
    'FSM': (35.34, -94.37),  # Fort Smith AR
    'GCK': (37.93, -100.72),  # Garden City KS
    'GEG': (47.62, -117.53),  # Spokane WA
    'GGW': (48.21, -106.62),  # Glasgow MT
    'GJT': (39.12, -108.53),  # Grand Junction CO
    'GRB': (44.48, -88.13),  # Green Bay WI
    'GTF': (47.48, -111.37),  # Great Falls MT
    'HAT': (35.27, -75.55),  # Cape Hatteras NC
    'HLC': (39.37, -99.83),  # Hill City KS
    'HMN': (32.85, -106.10),  # Holloman NM
    'HON': (44.38, -98.23),  # Huron SD
    'HTS': (38.37, -82.56),  # Huntington WV
    'ICT': (37.65, -97.43),  # Wichita KS
    'ILM': (34.27, -77.90),  # Wilmington NC
    'IND': (39.72, -86.28),  # Indianapolis IN
    'INL': (48.57, -93.40),  # International Falls MN
    'JAN': (32.31, -90.08),  # Jackson MS
    'JAX': (30.49, -81.69),  # Jacksonville FL
    'JFK': (40.64, -73.78),  # New York JFK
    'LAS': (36.08, -115.15),  # Las Vegas NV
    'LBB': (33.67, -101.82),  # Lubbock TX
    'LBF': (41.13, -100.68),  # North Platte NE
    'LCH': (30.13, -93.22),  # Lake Charles LA
    'LIT': (34.73, -92.22),  # Little Rock AR
    'LKN': (40.86, -115.74),  # Elko NV
    'MCI': (39.30, -94.71),  # Kansas City MO
    'MCO': (28.43, -81.31),  # Orlando FL
    'MEM': (35.06, -89.98),  # Memphis TN
    'MFR': (42.37, -122.87),  # Medford OR
    'MIA': (25.79, -80.29),  # Miami FL
    'MKE': (42.95, -87.90),  # Milwaukee WI
    'MLS': (46.43, -105.89),  # Miles City MT
    'MOB': (30.69, -88.25),  # Mobile AL
    'MOT': (48.26, -101.28),  # Minot ND
    'MRF': (30.37, -103.65),  # Marfa TX
    'MSN': (43.14, -89.34),  # Madison WI
    'MSP': (44.88, -93.22),  # Minneapolis MN
    'OAK': (37.72, -122.22),  # Oakland CA
    'OKC': (35.39, -97.60),  # Oklahoma City OK
    'OMA': (41.30, -95.89),  # Omaha NE
    'ONT': (34.06, -117.60),  # Ontario CA
    'ORD': (41.98, -87.90),  # Chicago O'Hare IL
    'ORF': (36.90, -76.20),  # Norfolk VA
    'PDX': (45.59, -122.60),  # Portland OR
    'PHX': (33.43, -112.02),  # Phoenix AZ
    'PIA': (40.67, -89.69),  # Peoria IL
    'PIR': (44.38, -100.29),  # Pierre SD
    'PIT': (40.50, -80.23),  # Pittsburgh PA
    'PSP': (33.83, -116.51),  # Palm Springs CA
    'PWM': (43.65, -70.31),  # Portland ME
    'RAP': (44.05, -103.05),  # Rapid City SD
    'RDU': (35.88, -78.79),  # Raleigh-Durham NC
    'RIC': (37.51, -77.32),  # Richmond VA
    'RNO': (39.50, -119.77),  # Reno NV
    'ROA': (37.32, -79.97),  # Roanoke VA
    'SAT': (29.53, -98.47),  # San Antonio TX
    'SAV': (32.13, -81.20),  # Savannah GA
    'SDF': (38.17, -85.74),  # Louisville KY
    'SEA': (47.45, -122.31),  # Seattle WA
    'SFO': (37.62, -122.38),  # San Francisco CA
    'SGF': (37.24, -93.39),  # Springfield MO
    'SHV': (32.45, -93.83),  # Shreveport LA
    'SLC': (40.79, -111.98),  # Salt Lake City UT
    'SPI': (39.84, -89.68),  # Springfield IL
    'SPS': (33.99, -98.49),  # Wichita Falls TX
    'SSM': (46.47, -84.36),  # Sault Ste Marie MI
    'STL': (38.75, -90.37),  # St Louis MO
    'SYR': (43.11, -76.10),  # Syracuse NY
    'TLH': (30.40, -84.35),  # Tallahassee FL
    'TOP': (39.07, -95.62),  # Topeka KS
    'TPA': (27.98, -82.53),  # Tampa FL
    'TUS': (32.12, -110.94),  # Tucson AZ
    'TVC': (44.74, -85.58),  # Traverse City MI
    'TYS': (35.81, -83.99),  # Knoxville TN
    'YKM': (46.57, -120.54),  # Yakima WA
}
