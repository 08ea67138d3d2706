"""
Per-planet constants for the low-precision position formulas.

Each record holds the linear mean-anomaly and sidereal-time terms, the
equation-of-center harmonics, the perihelion offset and the obliquity, all in
degrees (rates in degrees per day since J2000.0).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from ..logging import get_logger
from ..planet import Planet, UnknownPlanetError

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlanetaryConstants:
    planet: Planet
    m0: float
    m1: float
    theta0: float
    theta1: float
    c1: float
    c2: float
    c3: float
    c4: float
    c5: float
    c6: float
    p: float
    eps: float

    @property
    def equation_of_center_coefficients(self) -> Tuple[float, ...]:
        """Coefficients of sin(k*M) for k = 1..6."""
        return (self.c1, self.c2, self.c3, self.c4, self.c5, self.c6)

    @property
    def mean_anomaly_period(self) -> float:
        """Days for the mean anomaly to advance a full 360 degrees."""
        return 360.0 / self.m1


# fmt: off
_CONSTANTS = (
    # planet, m0, m1, theta0, theta1, c1..c6, p, eps
    PlanetaryConstants(Planet.MERCURY, 174.7948, 4.09233445, 132.3282, 6.1385025,     23.4400, 2.9818, 0.5255, 0.1058, 0.0241, 0.0055, 230.3265, 0.0351),
    PlanetaryConstants(Planet.VENUS,   50.4161,  1.60213034, 104.9067, -1.481368,     0.7758,  0.0033, 0,      0,      0,      0,      73.7576,  2.6376),
    PlanetaryConstants(Planet.EARTH,   357.5291, 0.98560028, 280.1470, 360.9856235,   1.9148,  0.0200, 0.0003, 0,      0,      0,      102.9373, 23.4393),
    PlanetaryConstants(Planet.MARS,    19.3730,  0.52402068, 313.3827, 350.89198226,  10.6912, 0.6228, 0.0503, 0.0046, 0.0005, 0,      71.0041,  25.1918),
    PlanetaryConstants(Planet.JUPITER, 20.0202,  0.08308529, 145.9722, 870.5360000,   5.5549,  0.1683, 0.0071, 0.0003, 0,      0,      237.1015, 3.1189),
    PlanetaryConstants(Planet.SATURN,  317.0207, 0.03344414, 174.3508, 810.7939024,   6.3585,  0.2204, 0.0106, 0.0006, 0,      0,      99.4587,  26.7285),
    PlanetaryConstants(Planet.URANUS,  141.0498, 0.01172834, 29.6474,  -501.1600928,  5.3042,  0.1534, 0.0062, 0.0003, 0,      0,      5.4634,   82.2298),
    PlanetaryConstants(Planet.NEPTUNE, 256.2250, 0.00598103, 52.4160,  536.3128662,   1.0302,  0.0058, 0,      0,      0,      0,      182.2100, 27.8477),
)
# fmt: on


def _build_table() -> Mapping[Planet, PlanetaryConstants]:
    table = {}
    for constants in _CONSTANTS:
        if constants.planet in table:
            raise ValueError(f"Duplicate constants for {constants.planet.name}")
        table[constants.planet] = constants
    return MappingProxyType(table)


PLANETARY_CONSTANTS: Mapping[Planet, PlanetaryConstants] = _build_table()


def get_planet_constants(planet: Union[Planet, str]) -> PlanetaryConstants:
    """Look up the constants for a planet.

    Args:
        planet: A Planet member or a case-insensitive planet name

    Returns:
        The planet's constant record

    Raises:
        UnknownPlanetError: If the planet is not one of the eight known planets
    """
    if isinstance(planet, str):
        planet = Planet.from_name(planet)
    try:
        return PLANETARY_CONSTANTS[planet]
    except (KeyError, TypeError):
        logger.debug(f"No constants for planet {planet!r}")
        raise UnknownPlanetError(planet) from None
