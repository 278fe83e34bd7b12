"""
Domain models and value objects.

Contains the human-readable time value types: Date, Clock, Weekday,
Duration, Timestamp and the Easter date computation.
"""

from civiltime.core.domain.clock import DEFAULT_CLOCK_PRECISION, ZERO_CLOCK, Clock
from civiltime.core.domain.date import Date, show_year, weekdate
from civiltime.core.domain.duration import (
    DEFAULT_DURATION_MAX_PRECISION,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_WEEK,
    SECONDS_PER_YEAR,
    ZERO_DURATION,
    Duration,
    days,
    hours,
    milli_seconds,
    minutes,
    seconds,
    weeks,
    years,
)
from civiltime.core.domain.easter import easter
from civiltime.core.domain.timestamp import EPOCH, Timestamp
from civiltime.core.domain.weekday import Weekday, iso_number, weekday

__all__ = [
    # Date
    "Date",
    "show_year",
    "weekdate",
    # Clock
    "Clock",
    "ZERO_CLOCK",
    "DEFAULT_CLOCK_PRECISION",
    # Weekday
    "Weekday",
    "iso_number",
    "weekday",
    # Duration — Types
    "Duration",
    "ZERO_DURATION",
    "DEFAULT_DURATION_MAX_PRECISION",
    # Duration — Unit factors
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_WEEK",
    "SECONDS_PER_YEAR",
    # Duration — Unit constructors
    "milli_seconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "years",
    # Timestamp
    "Timestamp",
    "EPOCH",
    # Easter
    "easter",
]
