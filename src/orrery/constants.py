"""Astronomical and time constants shared across orrery."""

import math

# Degrees to radians
RAD = math.pi / 180

# Julian date of the J2000.0 epoch (2000-01-01T12:00:00 UTC)
J2000 = 2451545.0

HOURS_PER_DAY = 24.0
MINUTES_PER_DAY = 24.0 * 60.0

# Decimal places kept on every derived angle
DEGREES_PRECISION = 4

# Full turn in degrees
FULL_CIRCLE = 360.0
