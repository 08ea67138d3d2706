"""
Low-precision planetary position formulas.

Every function takes a planet (a Planet member or its name) and a time (a
datetime or a Julian date) and returns degrees rounded to four decimal places.
Each rounded result is what the next formula in the chain consumes:

    mean anomaly -> equation of center -> ecliptic longitude -> RA/Dec

Angles are reduced with a truncated remainder (math.fmod), so a negative
argument gives a negative result rather than one wrapped into [0, 360).
"""

import math
from datetime import date, datetime
from typing import Tuple, Union

from ..constants import FULL_CIRCLE, RAD
from ..logging import get_logger
from ..planet import Planet
from ..space_time.julian import days_since_j2000
from ..space_time.rounding import round_degrees
from .planetary_constants import get_planet_constants

logger = get_logger(__name__)

PlanetLike = Union[Planet, str]
TimeLike = Union[float, date, datetime]


def get_mean_anomaly(planet: PlanetLike, time: TimeLike) -> float:
    """Mean anomaly M = M0 + M1 * d, reduced modulo 360 degrees."""
    constants = get_planet_constants(planet)
    d = days_since_j2000(time)
    mean_anomaly = constants.m0 + constants.m1 * d
    return round_degrees(math.fmod(mean_anomaly, FULL_CIRCLE))


def get_equation_of_center(planet: PlanetLike, time: TimeLike) -> float:
    """Equation of center, the six-term sine series in the mean anomaly.

    Args:
        planet: A Planet member or planet name
        time: Datetime or Julian date

    Returns:
        float: Difference between true and mean anomaly in degrees
    """
    constants = get_planet_constants(planet)
    m = get_mean_anomaly(planet, time) * RAD
    equation = sum(
        coefficient * math.sin(harmonic * m)
        for harmonic, coefficient in enumerate(
            constants.equation_of_center_coefficients, start=1
        )
    )
    return round_degrees(equation)


def get_sidereal_time(planet: PlanetLike, time: TimeLike, lw: float) -> float:
    """Local sidereal time in degrees.

    Args:
        planet: A Planet member or planet name
        time: Datetime or Julian date
        lw: Observer longitude in degrees, passed through unvalidated

    Returns:
        float: theta0 + theta1 * d - lw, reduced modulo 360 degrees
    """
    constants = get_planet_constants(planet)
    d = days_since_j2000(time)
    theta = constants.theta0 + constants.theta1 * d - lw
    return round_degrees(math.fmod(theta, FULL_CIRCLE))


def get_ecliptic_longitude(planet: PlanetLike, time: TimeLike) -> float:
    """Ecliptic longitude of the planet as seen from the Sun.

    Args:
        planet: A Planet member or planet name
        time: Datetime or Julian date

    Returns:
        float: M + P + 180 + C, reduced modulo 360 degrees
    """
    constants = get_planet_constants(planet)
    longitude = (
        get_mean_anomaly(planet, time)
        + constants.p
        + 180
        + get_equation_of_center(planet, time)
    )
    return round_degrees(math.fmod(longitude, FULL_CIRCLE))


# Alias
get_ecliptical_coordinates = get_ecliptic_longitude


def get_equatorial_coordinates(
    planet: PlanetLike, time: TimeLike
) -> Tuple[float, float]:
    """Right ascension and declination of the planet.

    Args:
        planet: A Planet member or planet name
        time: Datetime or Julian date

    Returns:
        Tuple[float, float]: (right ascension, declination) in degrees.
            Right ascension lies in (-180, 180] and declination in [-90, 90].
    """
    constants = get_planet_constants(planet)
    longitude = get_ecliptic_longitude(planet, time) * RAD
    eps = constants.eps * RAD

    alpha = math.atan2(math.sin(longitude) * math.cos(eps), math.cos(longitude)) / RAD
    delta = math.asin(math.sin(longitude) * math.sin(eps)) / RAD

    logger.debug(f"{constants.planet.name} at {time!r}: alpha={alpha}, delta={delta}")
    right_ascension = round_degrees(alpha)
    # atan2 just below the branch cut can round to -180
    if right_ascension == -180.0:
        right_ascension = 180.0
    return right_ascension, round_degrees(delta)
