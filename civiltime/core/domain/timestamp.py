"""
Timestamp — Момент времени относительно эпохи

Высокоточное количество секунд от эпохи Unix (1970-01-01T00:00:00 UTC).
Используется Duration для конверсии Duration ↔ Timestamp.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field

from civiltime.core.math.precision import (
    DecimalLike,
    add,
    divide,
    round_to,
    scale,
    subtract,
    to_decimal,
    to_fixed_trimmed,
)

# Эпоха отсчёта
EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Точность конверсии в datetime (микросекунды)
DATETIME_FRACTION_DIGITS: Final[int] = 6
MICROS_PER_SECOND: Final[Decimal] = Decimal(1_000_000)


class Timestamp(BaseModel):
    """Immutable момент времени: секунды от EPOCH (могут быть отрицательными)."""

    secs: Decimal = Field(..., description="Секунды от эпохи Unix")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, secs: DecimalLike = 0, **data) -> None:
        super().__init__(secs=to_decimal(secs), **data)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Timestamp":
        """
        Конверсия из datetime.

        Naive datetime трактуется как UTC.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - EPOCH
        whole = delta.days * 86400 + delta.seconds
        return cls(add(Decimal(whole), divide(Decimal(delta.microseconds), MICROS_PER_SECOND)))

    def to_datetime(self) -> datetime:
        """Конверсия в aware datetime (UTC), с округлением до микросекунд."""
        micros = int(scale(round_to(self.secs, DATETIME_FRACTION_DIGITS), MICROS_PER_SECOND))
        return EPOCH + timedelta(microseconds=micros)

    def compare(self, other: "Timestamp") -> int:
        """Трёхзначное сравнение: -1, 0 или 1."""
        return (self.secs > other.secs) - (self.secs < other.secs)

    def __lt__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other):
        from civiltime.core.domain.duration import Duration

        if not isinstance(other, Duration):
            return NotImplemented
        return Timestamp(add(self.secs, other.secs))

    def __sub__(self, other):
        """ts - duration → Timestamp; ts - ts → Duration."""
        from civiltime.core.domain.duration import Duration

        if isinstance(other, Duration):
            return Timestamp(subtract(self.secs, other.secs))
        if isinstance(other, Timestamp):
            return Duration.from_si_seconds(subtract(self.secs, other.secs))
        return NotImplemented

    def __str__(self) -> str:
        return f"@{to_fixed_trimmed(self.secs, 9)}"
