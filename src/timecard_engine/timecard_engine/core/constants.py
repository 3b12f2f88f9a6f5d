"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CLOSING_DAY = 25
DEFAULT_EXPECTED_WORKING_DAYS = 20

# Python weekday(): Monday=0 ... Sunday=6
DEFAULT_WEEKEND_DAYS = (5, 6)

MAX_RANGE_DAYS = 60
MAX_LOOKBACK_YEARS = 1
