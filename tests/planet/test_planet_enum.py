"""Tests for Planet enum."""

import unittest
from orrery.planet import Planet, UnknownPlanetError


class TestPlanetEnum(unittest.TestCase):
    """Test Planet enum values."""

    def test_eight_planets(self):
        self.assertEqual(
            [planet.name for planet in Planet],
            [
                "MERCURY",
                "VENUS",
                "EARTH",
                "MARS",
                "JUPITER",
                "SATURN",
                "URANUS",
                "NEPTUNE",
            ],
        )

    def test_values_are_lower_case_names(self):
        for planet in Planet:
            self.assertEqual(planet.value, planet.name.lower())

    def test_from_name_is_case_insensitive(self):
        self.assertIs(Planet.from_name("Mars"), Planet.MARS)
        self.assertIs(Planet.from_name("mars"), Planet.MARS)
        self.assertIs(Planet.from_name(" MARS "), Planet.MARS)

    def test_from_name_unknown(self):
        with self.assertRaises(UnknownPlanetError) as context:
            Planet.from_name("Pluto")
        self.assertEqual(context.exception.planet, "Pluto")
        self.assertIn("Pluto", str(context.exception))

    def test_from_name_rejects_non_strings(self):
        with self.assertRaises(UnknownPlanetError):
            Planet.from_name(None)

    def test_unknown_planet_is_lookup_error(self):
        self.assertTrue(issubclass(UnknownPlanetError, LookupError))


if __name__ == "__main__":
    unittest.main()
