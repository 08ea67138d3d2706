from .quantities import Quantity
from .ephemeris import Ephemeris
from .time_spec import TimeSpec, TimeSpecType
from .planetary_constants import (
    PLANETARY_CONSTANTS,
    PlanetaryConstants,
    get_planet_constants,
)
from .positions import (
    get_mean_anomaly,
    get_equation_of_center,
    get_sidereal_time,
    get_ecliptic_longitude,
    get_ecliptical_coordinates,
    get_equatorial_coordinates,
)
from .low_precision import LowPrecisionEphemeris

__all__ = [
    "Quantity",
    "Ephemeris",
    "TimeSpec",
    "TimeSpecType",
    "PLANETARY_CONSTANTS",
    "PlanetaryConstants",
    "get_planet_constants",
    "get_mean_anomaly",
    "get_equation_of_center",
    "get_sidereal_time",
    "get_ecliptic_longitude",
    "get_ecliptical_coordinates",
    "get_equatorial_coordinates",
    "LowPrecisionEphemeris",
]
