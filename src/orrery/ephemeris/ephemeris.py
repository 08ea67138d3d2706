from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, Union
from datetime import datetime

from ..planet import Planet
from .quantities import Quantity
from .time_spec import TimeSpec


class Ephemeris(ABC):
    """
    Abstract interface for ephemeris data sources.

    This class provides a common interface for retrieving planetary positions
    and other astronomical quantities.
    """

    @abstractmethod
    def get_planet_position(
        self,
        planet: Union[Planet, str],
        time: Optional[Union[float, datetime]] = None,
    ) -> Dict[Quantity, Any]:
        """
        Get a planet's position at a specific time.

        Args:
            planet: The planet, as a Planet member or its name.
            time: The time for which to compute the position.
                  If None, the current time is used.
                  Can be a Julian date float or a datetime object.

        Returns:
            A dictionary mapping Quantity enum values to their corresponding values.
        """
        pass

    @abstractmethod
    def get_planet_positions(
        self, planet: Union[Planet, str], time_spec: TimeSpec
    ) -> Dict[float, Dict[Quantity, Any]]:
        """
        Get a planet's positions for multiple times specified by a TimeSpec.

        Args:
            planet: The planet, as a Planet member or its name.
            time_spec: Time specification defining the times to compute positions for.

        Returns:
            A dictionary mapping Julian dates (as floats) to position data dictionaries.
        """
        pass
