from enum import Enum
from typing import Any


class UnknownPlanetError(LookupError):
    """Raised when a planet identifier is not one of the eight known planets."""

    def __init__(self, planet: Any) -> None:
        self.planet = planet
        super().__init__(f"Unknown planet: {planet!r}")


class Planet(Enum):
    MERCURY = "mercury"
    VENUS = "venus"
    EARTH = "earth"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"

    @classmethod
    def from_name(cls, name: str) -> "Planet":
        """Resolve a case-insensitive planet name such as "Mars" or "MARS".

        Raises:
            UnknownPlanetError: If the name is not a known planet
        """
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            raise UnknownPlanetError(name) from None
