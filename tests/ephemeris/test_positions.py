"""Tests for the low-precision position formulas."""

import math
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from orrery.constants import RAD
from orrery.planet import Planet, UnknownPlanetError
from orrery.ephemeris.planetary_constants import get_planet_constants
from orrery.ephemeris.positions import (
    get_ecliptic_longitude,
    get_ecliptical_coordinates,
    get_equation_of_center,
    get_equatorial_coordinates,
    get_mean_anomaly,
    get_sidereal_time,
)

J2000_DT = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
SPRING_2025 = datetime(2025, 3, 19, 12, 0, tzinfo=timezone.utc)
NEW_YEAR_1990 = datetime(1990, 1, 1, 0, 0, tzinfo=timezone.utc)

# planet: (mean anomaly, equation of center, ecliptic longitude, RA, Dec)
J2000_POSITIONS = {
    Planet.MERCURY: (174.7948, 1.6993, 226.8206, -133.1794, -0.0256),
    Planet.VENUS: (50.4161, 0.6011, 304.7748, -55.1967, -2.1663),
    Planet.EARTH: (357.5291, -0.0843, 280.3821, -78.7072, -23.0332),
    Planet.MARS: (19.3730, 3.9839, 274.3610, -85.1827, -25.1138),
    Planet.JUPITER: (20.0202, 2.0164, 79.1381, 79.1224, 3.0630),
    Planet.SATURN: (317.0207, -4.5630, 231.9164, -131.2634, -20.7330),
    Planet.URANUS: (141.0498, 3.1899, 329.7031, -4.5167, -29.9900),
    Planet.NEPTUNE: (256.2250, -0.9979, 257.4371, -104.1459, -27.1254),
}

# planet: (mean anomaly, equation of center, ecliptic longitude, RA, Dec, LST at 5 deg)
SPRING_2025_POSITIONS = {
    Planet.MERCURY: (61.1028, 22.8997, 134.3290, 134.3290, 0.0251, 136.7977),
    Planet.VENUS: (44.4344, 0.5464, 298.7384, -61.2360, -2.3125, -222.0112),
    Planet.EARTH: (73.9221, 1.8503, 358.7097, -1.1839, -0.5132, 351.7538),
    Planet.MARS: (165.0794, 2.4748, 58.5583, 55.9544, 21.2939, 312.6473),
    Planet.JUPITER: (65.1526, 5.1668, 127.4209, 127.4619, 2.4766, 66.9962),
    Planet.SATURN: (265.0078, -6.2861, 178.1804, 178.3747, 0.8183, 10.3980),
    Planet.URANUS: (249.0561, -4.8488, 69.6707, 20.0480, 68.2952, -318.6472),
    Planet.NEPTUNE: (311.3043, -0.7797, 312.7346, -43.7422, -20.0661, 112.6008),
}


class TestMeanAnomaly(unittest.TestCase):
    def test_j2000_golden_values(self):
        for planet, expected in J2000_POSITIONS.items():
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_mean_anomaly(planet, J2000_DT), expected[0], places=4
                )

    def test_spring_2025_golden_values(self):
        for planet, expected in SPRING_2025_POSITIONS.items():
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_mean_anomaly(planet, SPRING_2025), expected[0], places=4
                )

    def test_negative_argument_gives_negative_remainder(self):
        """M0 + M1 * d < 0 is not wrapped into [0, 360)."""
        result = get_mean_anomaly(Planet.EARTH, NEW_YEAR_1990)
        self.assertLess(result, 0)
        self.assertAlmostEqual(result, -2.3759, places=4)

        self.assertAlmostEqual(
            get_mean_anomaly(Planet.JUPITER, NEW_YEAR_1990), -283.4488, places=4
        )

    def test_zoned_datetime_at_the_end_of_the_range(self):
        latest = datetime(9999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
        self.assertIsInstance(get_mean_anomaly(Planet.EARTH, latest), float)

    def test_accepts_planet_names_and_julian_dates(self):
        self.assertEqual(
            get_mean_anomaly("earth", 2460754.0),
            get_mean_anomaly(Planet.EARTH, SPRING_2025),
        )


class TestEquationOfCenter(unittest.TestCase):
    def test_j2000_golden_values(self):
        for planet, expected in J2000_POSITIONS.items():
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_equation_of_center(planet, J2000_DT), expected[1], places=4
                )

    def test_spring_2025_golden_values(self):
        for planet, expected in SPRING_2025_POSITIONS.items():
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_equation_of_center(planet, SPRING_2025), expected[1], places=4
                )

    def test_periodic_in_mean_anomaly(self):
        for planet in (Planet.MERCURY, Planet.EARTH, Planet.MARS):
            with self.subTest(planet=planet):
                period = get_planet_constants(planet).mean_anomaly_period
                one_period_later = J2000_DT + timedelta(days=period)
                self.assertAlmostEqual(
                    get_equation_of_center(planet, one_period_later),
                    get_equation_of_center(planet, J2000_DT),
                    places=4,
                )

    def test_uses_rounded_mean_anomaly(self):
        mercury = get_planet_constants(Planet.MERCURY)
        m = 61.1028 * RAD
        expected = sum(
            c * math.sin(k * m)
            for k, c in enumerate(mercury.equation_of_center_coefficients, start=1)
        )
        self.assertEqual(
            get_equation_of_center(Planet.MERCURY, SPRING_2025), round(expected, 4)
        )


class TestEclipticLongitude(unittest.TestCase):
    def test_j2000_golden_values(self):
        for planet, expected in J2000_POSITIONS.items():
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_ecliptic_longitude(planet, J2000_DT), expected[2], places=4
                )

    def test_spring_2025_golden_values(self):
        for planet, expected in SPRING_2025_POSITIONS.items():
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_ecliptic_longitude(planet, SPRING_2025), expected[2], places=4
                )

    def test_alias(self):
        self.assertIs(get_ecliptical_coordinates, get_ecliptic_longitude)

    def test_earth_j2000_end_to_end(self):
        """Mean anomaly feeds the equation of center which feeds the longitude."""
        mean_anomaly = get_mean_anomaly(Planet.EARTH, J2000_DT)
        self.assertEqual(mean_anomaly, 357.5291)

        m = mean_anomaly * RAD
        center = round(
            1.9148 * math.sin(m) + 0.0200 * math.sin(2 * m) + 0.0003 * math.sin(3 * m),
            4,
        )
        self.assertEqual(get_equation_of_center(Planet.EARTH, J2000_DT), center)
        self.assertEqual(center, -0.0843)

        longitude = round(math.fmod(mean_anomaly + 102.9373 + 180 + center, 360), 4)
        self.assertEqual(get_ecliptic_longitude(Planet.EARTH, J2000_DT), longitude)
        self.assertAlmostEqual(longitude, 280.3821, places=4)


class TestEquatorialCoordinates(unittest.TestCase):
    def test_j2000_golden_values(self):
        for planet, expected in J2000_POSITIONS.items():
            with self.subTest(planet=planet):
                alpha, delta = get_equatorial_coordinates(planet, J2000_DT)
                self.assertAlmostEqual(alpha, expected[3], places=4)
                self.assertAlmostEqual(delta, expected[4], places=4)

    def test_spring_2025_golden_values(self):
        for planet, expected in SPRING_2025_POSITIONS.items():
            with self.subTest(planet=planet):
                alpha, delta = get_equatorial_coordinates(planet, SPRING_2025)
                self.assertAlmostEqual(alpha, expected[3], places=4)
                self.assertAlmostEqual(delta, expected[4], places=4)

    def test_branch_cut_reported_as_positive_180(self):
        """A right ascension rounding to -180 comes back as 180."""
        with patch(
            "orrery.ephemeris.positions.get_ecliptic_longitude", return_value=180.0001
        ):
            result = get_equatorial_coordinates(Planet.URANUS, J2000_DT)
        self.assertEqual(result, (180.0, -0.0001))

    def test_ranges_over_sampled_dates(self):
        # 1950 to 2050, about every 37 days
        for jd in range(2433282, 2469808, 37):
            for planet in Planet:
                alpha, delta = get_equatorial_coordinates(planet, float(jd))
                self.assertGreater(alpha, -180.0, f"{planet} at JD {jd}")
                self.assertLessEqual(alpha, 180.0, f"{planet} at JD {jd}")
                self.assertGreaterEqual(delta, -90.0, f"{planet} at JD {jd}")
                self.assertLessEqual(delta, 90.0, f"{planet} at JD {jd}")


class TestSiderealTime(unittest.TestCase):
    def test_j2000_at_greenwich_is_theta0(self):
        for planet in Planet:
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_sidereal_time(planet, J2000_DT, 0),
                    get_planet_constants(planet).theta0,
                    places=4,
                )

    def test_spring_2025_golden_values(self):
        for planet, expected in SPRING_2025_POSITIONS.items():
            with self.subTest(planet=planet):
                self.assertAlmostEqual(
                    get_sidereal_time(planet, SPRING_2025, 5), expected[5], places=4
                )

    def test_longitude_is_subtracted(self):
        self.assertAlmostEqual(
            get_sidereal_time(Planet.EARTH, J2000_DT, 10), 270.1470, places=4
        )
        self.assertAlmostEqual(
            get_sidereal_time(Planet.EARTH, J2000_DT, -10), 290.1470, places=4
        )

    def test_negative_remainder(self):
        self.assertLess(get_sidereal_time(Planet.VENUS, SPRING_2025, 5), 0)
        self.assertAlmostEqual(
            get_sidereal_time(Planet.EARTH, NEW_YEAR_1990, 0), -259.8428, places=4
        )

    def test_unvalidated_longitude(self):
        self.assertAlmostEqual(
            get_sidereal_time(Planet.EARTH, J2000_DT, 400), -119.8530, places=4
        )


class TestUnknownPlanet(unittest.TestCase):
    def test_every_formula_raises(self):
        calls = [
            lambda planet: get_mean_anomaly(planet, J2000_DT),
            lambda planet: get_equation_of_center(planet, J2000_DT),
            lambda planet: get_ecliptic_longitude(planet, J2000_DT),
            lambda planet: get_equatorial_coordinates(planet, J2000_DT),
            lambda planet: get_sidereal_time(planet, J2000_DT, 0.0),
        ]
        for call in calls:
            for planet in ("Pluto", "Sun", None):
                with self.subTest(call=call, planet=planet):
                    with self.assertRaises(UnknownPlanetError):
                        call(planet)


if __name__ == "__main__":
    unittest.main()
