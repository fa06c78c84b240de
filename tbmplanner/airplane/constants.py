# tbmplanner/airplane/constants.py

class TBM850Constants:
    """Book performance and fuel planning figures for the TBM 850 (PT6A-66D)"""

    # ===== PERFORMANCE TABLE =====
    # (altitude ft, climb KIAS, rate of climb fpm, cruise KTAS, cruise gph, descent KIAS)
    PERFORMANCE_TABLE = (
        (0,     85,  1000, 227, 83.0,  79),
        (1000,  124, 1500, 229, 81.0,  98),
        (2000,  148, 1500, 231, 80.0, 128),
        (3000,  158, 2000, 233, 78.0, 158),
        (4000,  158, 1980, 236, 77.0, 197),
        (5000,  157, 1960, 238, 75.0, 227),
        (6000,  158, 1940, 240, 74.0, 227),
        (7000,  158, 1920, 243, 73.0, 226),
        (8000,  158, 1900, 245, 71.0, 227),
        (9000,  158, 1785, 248, 70.0, 227),
        (10000, 157, 1670, 250, 68.0, 226),
        (11000, 158, 1630, 252, 67.0, 226),
        (12000, 158, 1590, 255, 66.0, 226),
        (13000, 157, 1550, 257, 65.0, 227),
        (14000, 158, 1510, 260, 64.0, 227),
        (15000, 157, 1470, 262, 62.5, 226),
        (16000, 158, 1425, 265, 61.8, 226),
        (17000, 158, 1385, 268, 61.0, 227),
        (18000, 158, 1345, 270, 60.2, 227),
        (19000, 157, 1305, 273, 59.6, 226),
        (20000, 158, 1265, 276, 58.9, 226),
        (21000, 156, 1225, 279, 58.5, 227),
        (22000, 154, 1185, 281, 58.0, 227),
        (23000, 152, 1145, 285, 57.5, 222),
        (24000, 150, 1105, 288, 57.1, 217),
        (25000, 147, 1065, 291, 56.8, 210),
        (26000, 146, 1020, 292, 55.0, 206),
        (27000, 144,  980, 289, 55.0, 200),
        (28000, 142,  940, 287, 55.0, 195),
        (29000, 139,  900, 285, 56.0, 189),
        (30000, 138,  860, 280, 53.0, 184),
        (31000, 135,  800, 277, 48.0, 177),
    )

    # ===== CLIMB / DESCENT =====
    CLIMB = {
        'CORRECTION_FACTOR': 1.40,      # Observed vs book climb time/fuel/distance
        'BAND_FT': 1000,                # Integration step
        'FUEL_FLOW_LOW': (2000, 78.0),  # (ft, gph)
        'FUEL_FLOW_HIGH': (31000, 54.0),
    }

    DESCENT = {
        'CORRECTION_FACTOR': 1.12,
        'BAND_FT': 1000,
        'FUEL_FLOW_LOW': (2000, 78.0),
        'FUEL_FLOW_HIGH': (31000, 46.0),
        'RATE_PER_KIAS': 8,             # fpm per knot of descent IAS
        'MIN_RATE_FPM': 1000,
        'MAX_RATE_FPM': 2500,
    }

    # True airspeeds flown through the climb and descent, used for wind correction
    CLIMB_TAS_BY_ALT = {
        2000: 153, 4000: 168, 6000: 173, 8000: 179, 10000: 183, 12000: 190,
        14000: 196, 16000: 203, 18000: 210, 20000: 216, 22000: 218, 24000: 221,
        26000: 225, 28000: 229, 30000: 230, 31000: 226,
    }
    DESCENT_TAS_BY_ALT = {
        2000: 132, 4000: 168, 6000: 249, 8000: 257, 10000: 263, 12000: 272,
        14000: 281, 16000: 290, 18000: 302, 20000: 310, 22000: 322, 24000: 320,
        26000: 318, 28000: 315, 30000: 307, 31000: 297,
    }

    # ===== FUEL SYSTEM =====
    FUEL = {
        'USABLE_CAPACITY_GAL': 282,
        'MIN_LANDING_RESERVE_GAL': 60,  # ~45 min IFR reserve plus approach margin
        'TAXI_FUEL_GAL': 8,
        'FIRST_HOUR_GPH': 75,           # Two-tier cruise burn
        'SUBSEQUENT_GPH': 65,
    }
