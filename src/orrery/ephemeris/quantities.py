from enum import Enum


class Quantity(Enum):
    """
    Quantities reported by the low-precision ephemeris.
    """

    # Time coordinates
    JULIAN_DATE = "julian_date"
    DAYS_SINCE_J2000 = "days_since_j2000"

    # Orbital quantities
    MEAN_ANOMALY = "mean_anomaly"
    EQUATION_OF_CENTER = "equation_of_center"

    # Positional quantities
    ECLIPTIC_LONGITUDE = "ecliptic_longitude"
    RIGHT_ASCENSION = "right_ascension"
    DECLINATION = "declination"

    # Time-related
    LOCAL_SIDEREAL_TIME = "local_sidereal_time"
