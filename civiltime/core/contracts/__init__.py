"""
Contract Validation Module

Модуль для валидации JSON-представлений value-типов civiltime.
"""

from .validators import (
    ClockValidator,
    ContractValidator,
    DateValidator,
    DurationValidator,
    SchemaLoader,
    TimestampValidator,
    WeekdayValidator,
    validate_clock,
    validate_date,
    validate_duration,
    validate_timestamp,
    validate_weekday,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DateValidator",
    "ClockValidator",
    "DurationValidator",
    "TimestampValidator",
    "WeekdayValidator",
    # Functions
    "validate_date",
    "validate_clock",
    "validate_duration",
    "validate_timestamp",
    "validate_weekday",
]
