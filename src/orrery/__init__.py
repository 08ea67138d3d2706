"""Low-precision positions of the eight major planets."""

from .constants import J2000, RAD
from .planet import Planet, UnknownPlanetError
from .space_time import days_since_j2000
from .ephemeris import (
    LowPrecisionEphemeris,
    PlanetaryConstants,
    Quantity,
    TimeSpec,
    get_ecliptic_longitude,
    get_ecliptical_coordinates,
    get_equation_of_center,
    get_equatorial_coordinates,
    get_mean_anomaly,
    get_planet_constants,
    get_sidereal_time,
)

__all__ = [
    "J2000",
    "RAD",
    "Planet",
    "UnknownPlanetError",
    "days_since_j2000",
    "LowPrecisionEphemeris",
    "PlanetaryConstants",
    "Quantity",
    "TimeSpec",
    "get_ecliptic_longitude",
    "get_ecliptical_coordinates",
    "get_equation_of_center",
    "get_equatorial_coordinates",
    "get_mean_anomaly",
    "get_planet_constants",
    "get_sidereal_time",
]
