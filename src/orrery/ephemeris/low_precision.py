"""
Formula-based ephemeris implementation.

This module provides an implementation of the Ephemeris interface that
evaluates the closed-form low-precision formulas instead of reading tabulated
data, so it needs no data files and no network access.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from ..logging import get_logger
from ..planet import Planet
from ..constants import J2000
from .ephemeris import Ephemeris
from .planetary_constants import get_planet_constants
from .positions import (
    get_ecliptic_longitude,
    get_equation_of_center,
    get_equatorial_coordinates,
    get_mean_anomaly,
    get_sidereal_time,
)
from .quantities import Quantity
from .time_spec import TimeSpec

logger = get_logger(__name__)


class LowPrecisionEphemeris(Ephemeris):
    """
    Implements the Ephemeris interface with the low-precision position formulas.

    Positions are accurate to roughly a degree, which is enough for charts and
    rise/set estimates but not for pointing instruments.
    """

    def __init__(self, longitude: float = 0.0) -> None:
        """
        Initialize a LowPrecisionEphemeris instance.

        Args:
            longitude: Observer longitude in degrees used for local sidereal time
        """
        self.longitude = longitude

    def get_planet_position(
        self,
        planet: Union[Planet, str],
        time: Optional[Union[float, datetime]] = None,
    ) -> Dict[Quantity, Any]:
        """
        Get a planet's position at a specific time.

        Args:
            planet: The planet, as a Planet member or its name
            time: The time for which to compute the position.
                  If None, the current time is used.
                  Can be a Julian date float or a datetime object.

        Returns:
            A dictionary mapping Quantity enum values to their corresponding values
        """
        if time is None:
            time = datetime.now(timezone.utc)

        time_spec = TimeSpec.from_dates([time])
        positions = self.get_planet_positions(planet, time_spec)
        return next(iter(positions.values()))

    def get_planet_positions(
        self,
        planet: Union[Planet, str],
        time_spec: TimeSpec,
    ) -> Dict[float, Dict[Quantity, Any]]:
        """
        Get a planet's positions for multiple times specified by a TimeSpec.

        Args:
            planet: The planet, as a Planet member or its name
            time_spec: Time specification defining the times to compute positions for

        Returns:
            A dictionary mapping Julian dates to position data dictionaries
        """
        # Resolve once so an unknown planet fails before any work is done
        planet = get_planet_constants(planet).planet

        result: Dict[float, Dict[Quantity, Any]] = {}
        for jd in time_spec.to_julian_days():
            result[jd] = self._position_at(planet, jd)

        logger.debug(f"Computed {len(result)} positions for {planet.name}")
        return result

    def _position_at(self, planet: Planet, jd: float) -> Dict[Quantity, Any]:
        right_ascension, declination = get_equatorial_coordinates(planet, jd)
        return {
            Quantity.JULIAN_DATE: jd,
            Quantity.DAYS_SINCE_J2000: jd - J2000,
            Quantity.MEAN_ANOMALY: get_mean_anomaly(planet, jd),
            Quantity.EQUATION_OF_CENTER: get_equation_of_center(planet, jd),
            Quantity.ECLIPTIC_LONGITUDE: get_ecliptic_longitude(planet, jd),
            Quantity.RIGHT_ASCENSION: right_ascension,
            Quantity.DECLINATION: declination,
            Quantity.LOCAL_SIDEREAL_TIME: get_sidereal_time(
                planet, jd, self.longitude
            ),
        }
