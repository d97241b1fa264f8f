"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_WORKDAY_HOURS = 8.0
DEFAULT_EXCEPTION_HOURS_PER_DAY = 1.0
DEFAULT_BONUS_RATE_PERCENT = 8.33

NO_TIME_SENTINEL = "--:--"
MINUTES_PER_DAY = 24 * 60

NEVER_PAID_LABEL = "Never"
UNKNOWN_EMPLOYEE_NAME = "Unknown"
