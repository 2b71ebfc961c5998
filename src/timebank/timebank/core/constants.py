"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_ORG_TIMEZONE = "America/Sao_Paulo"

DEFAULT_WORK_START = time(7, 0)
DEFAULT_WORK_END = time(17, 0)
DEFAULT_TOLERANCE_MINUTES = 10

ASSUMED_LUNCH_HOURS = 1
NIGHT_PREMIUM_START_HOUR = 22

TIER1_MULTIPLIER = 1.5
TIER2_MULTIPLIER = 2.0

# Hour quantities are rounded to this many decimals (sub-second precision).
HOURS_PRECISION = 6
