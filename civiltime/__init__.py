"""
civiltime — calendar-agnostic building blocks for human-readable time.

Date, Clock, Weekday, Duration and the Gregorian Easter computation.
"""

from loguru import logger

from civiltime.core.domain import (
    ZERO_CLOCK,
    ZERO_DURATION,
    Clock,
    Date,
    Duration,
    Timestamp,
    Weekday,
    days,
    easter,
    hours,
    milli_seconds,
    minutes,
    seconds,
    show_year,
    weekday,
    weekdate,
    weeks,
    years,
)

__version__ = "0.1.0"

logger.disable(__name__)

__all__ = [
    "Clock",
    "Date",
    "Duration",
    "Timestamp",
    "Weekday",
    "ZERO_CLOCK",
    "ZERO_DURATION",
    "days",
    "easter",
    "hours",
    "milli_seconds",
    "minutes",
    "seconds",
    "show_year",
    "weekday",
    "weekdate",
    "weeks",
    "years",
]
