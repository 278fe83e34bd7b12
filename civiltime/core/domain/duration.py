"""
Duration — Прошедшее время в секундах SI

Immutable Pydantic модель поверх высокоточного знакового количества
секунд. Секунды SI (атомные), не секунды UT1: длительность не зависит
от неравномерности вращения Земли.

Единичные конструкторы используют фиксированные коэффициенты:
- minutes(n) = 60n, hours(n) = 3600n
- days(n) = 86400n (без leap seconds)
- weeks(n) = 7 * 86400n
- years(n) = 365 * 86400n (без високосных лет)

Это приближения для грубой арифметики прошедшего времени,
не для точного шага по календарю.
"""

from decimal import Decimal
from typing import Final

from pydantic import BaseModel, Field

from civiltime.core.domain.timestamp import Timestamp
from civiltime.core.math.precision import (
    DecimalLike,
    add,
    divide,
    fraction,
    from_parts,
    round_int,
    scale,
    to_decimal,
    to_fixed_trimmed,
    trunc,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Точность отображения по умолчанию (наносекунды)
DEFAULT_DURATION_MAX_PRECISION: Final[int] = 9

# Масштабы для milli/nano (Decimal, чтобы не терять точность на больших значениях)
MILLIS_PER_SECOND: Final[Decimal] = Decimal(1000)
NANOS_PER_SECOND: Final[Decimal] = Decimal(1_000_000_000)

# Коэффициенты единиц (секунды)
SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: Final[int] = 24 * SECONDS_PER_HOUR
SECONDS_PER_WEEK: Final[int] = 7 * SECONDS_PER_DAY
SECONDS_PER_YEAR: Final[int] = 365 * SECONDS_PER_DAY


# =============================================================================
# DURATION MODEL
# =============================================================================


class Duration(BaseModel):
    """
    Длительность в секундах SI.

    Может быть отрицательной. Сравнение и арифметика — по значению secs.
    """

    secs: Decimal = Field(..., description="Прошедшие секунды SI (со знаком)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, secs: DecimalLike = 0, **data) -> None:
        super().__init__(secs=to_decimal(secs), **data)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Duration":
        return ZERO_DURATION

    @classmethod
    def from_timespan(cls, secs: Decimal) -> "Duration":
        """Длительность из высокоточного значения секунд."""
        return cls(secs)

    @classmethod
    def from_si_seconds(cls, secs: Decimal) -> "Duration":
        """
        То же, что from_timespan.

        Имя фиксирует гарантию вызывающего: значение — секунды SI.
        """
        return cls(secs)

    @classmethod
    def from_parts(cls, int_seconds: int, frac: float) -> "Duration":
        """Длительность из целых секунд и дробной части (double)."""
        return cls(from_parts(int_seconds, frac))

    @classmethod
    def from_float(cls, secs: float) -> "Duration":
        return cls(to_decimal(secs))

    @classmethod
    def from_timestamp(cls, ts: Timestamp) -> "Duration":
        """Длительность от эпохи до ts."""
        return cls(ts.secs)

    # -------------------------------------------------------------------------
    # Конверсии и аксессоры
    # -------------------------------------------------------------------------

    def to_timespan(self) -> Decimal:
        return self.secs

    def to_timestamp(self) -> Timestamp:
        """Момент, отстоящий от эпохи на эту длительность."""
        return Timestamp(self.secs)

    def seconds(self) -> Decimal:
        return self.secs

    def milli_seconds(self) -> int:
        """Длительность в миллисекундах, округлённая до целого."""
        return round_int(scale(self.secs, MILLIS_PER_SECOND))

    def nano_seconds(self) -> int:
        """Длительность в наносекундах, округлённая до целого."""
        return round_int(scale(self.secs, NANOS_PER_SECOND))

    def trunc(self) -> int:
        """Целые секунды (усечение к нулю)."""
        return trunc(self.secs)

    def fraction(self) -> float:
        """
        Дробная часть секунд как float.

        Теряет точность — только для отображения.
        """
        return float(fraction(self.secs))

    def is_negative(self) -> bool:
        return self.secs < 0

    def is_zero(self) -> bool:
        return self.secs == 0

    def is_positive(self) -> bool:
        return self.secs > 0

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Duration") -> int:
        """Трёхзначное сравнение: -1, 0 или 1."""
        return (self.secs > other.secs) - (self.secs < other.secs)

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash(self.secs)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(add(self.secs, other.secs))

    def __neg__(self) -> "Duration":
        return Duration(scale(self.secs, Decimal(-1)))

    def __sub__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self + (-other)

    def __abs__(self) -> "Duration":
        return -self if self.is_negative() else self

    def __mul__(self, n):
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        return Duration(scale(self.secs, Decimal(n)))

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def show(self, max_prec: int = DEFAULT_DURATION_MAX_PRECISION) -> str:
        """
        Fixed-point секунды (не более max_prec дробных знаков) с суффиксом 's'.

        Examples:
            >>> Duration(90).show()
            '90s'
            >>> Duration('-1.25').show()
            '-1.25s'
        """
        return to_fixed_trimmed(self.secs, max_prec) + "s"

    def __str__(self) -> str:
        return self.show()


ZERO_DURATION: Final[Duration] = Duration(0)


# =============================================================================
# ЕДИНИЧНЫЕ КОНСТРУКТОРЫ
# =============================================================================


def milli_seconds(n: DecimalLike) -> Duration:
    return Duration(divide(to_decimal(n), MILLIS_PER_SECOND))


def seconds(n: DecimalLike) -> Duration:
    return Duration(to_decimal(n))


def minutes(n: DecimalLike) -> Duration:
    return Duration(scale(to_decimal(n), Decimal(SECONDS_PER_MINUTE)))


def hours(n: DecimalLike) -> Duration:
    return Duration(scale(to_decimal(n), Decimal(SECONDS_PER_HOUR)))


def days(n: DecimalLike) -> Duration:
    """n суток по 86400 секунд (leap seconds не учитываются)."""
    return Duration(scale(to_decimal(n), Decimal(SECONDS_PER_DAY)))


def weeks(n: DecimalLike) -> Duration:
    return Duration(scale(to_decimal(n), Decimal(SECONDS_PER_WEEK)))


def years(n: DecimalLike) -> Duration:
    """n лет по 365 суток (високосные годы не учитываются)."""
    return Duration(scale(to_decimal(n), Decimal(SECONDS_PER_YEAR)))

