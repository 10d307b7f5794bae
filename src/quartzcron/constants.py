"""Constants for Quartz cron fields."""

from enum import Enum


class CronField(Enum):
    """Position-ordered fields of a Quartz cron expression."""
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"
    YEAR = "year"


FIELD_ORDER = (
    CronField.SECONDS,
    CronField.MINUTES,
    CronField.HOURS,
    CronField.DAY_OF_MONTH,
    CronField.MONTH,
    CronField.DAY_OF_WEEK,
    CronField.YEAR,
)

# Accepted token counts (year is optional)
FIELD_COUNTS = (6, 7)

MONTHS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

DAYS_OF_WEEK = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

# Inclusive boundaries
SECONDS_BOUNDARIES = (0, 59)
MINUTES_BOUNDARIES = SECONDS_BOUNDARIES
HOURS_BOUNDARIES = (0, 23)
DAYS_OF_MONTH_BOUNDARIES = (1, 31)
MONTHS_BOUNDARIES = (1, 12)
DAYS_OF_WEEK_BOUNDARIES = (1, 7)
YEARS_BOUNDARIES = (1970, 2199)

LAST_DAY_OFFSET_BOUNDARIES = (0, 30)
WEEKDAY_OCCURRENCE_BOUNDARIES = (1, 5)

WILDCARD = "*"
UNSPECIFIED = "?"
PLACEHOLDERS = (WILDCARD, UNSPECIFIED)
