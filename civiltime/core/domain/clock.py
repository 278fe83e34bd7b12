"""
Clock — Время суток как часы/минуты/дробные секунды

Immutable Pydantic модель. Нормализующие конструкторы (from_seconds,
from_duration, from_parts) гарантируют:
    0 <= minutes < 60
    0 <= seconds < 60
Часы не ограничены (нет переноса через 24 часа).

ВАЖНО: сложение двух Clock покомпонентное и НЕ нормализует результат:
Clock(0, 50, 0) + Clock(0, 20, 0) == Clock(0, 70, 0).

Сравнение (<, <=, >, >=, compare) — по total_seconds(); равенство (==)
покомпонентное, чтобы ненормализованные значения оставались различимыми.

Модель без leap seconds: ровно 60 секунд в минуте и 60 минут в часе.
"""

from decimal import Decimal
from typing import Final

from loguru import logger
from pydantic import BaseModel, Field

from civiltime.core.domain.duration import (
    MILLIS_PER_SECOND,
    NANOS_PER_SECOND,
    SECONDS_PER_MINUTE,
    Duration,
)
from civiltime.core.math.precision import (
    DecimalLike,
    add,
    floor,
    fraction,
    from_parts,
    round_to,
    scale,
    subtract,
    to_decimal,
    to_fixed,
    trunc,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Точность отображения секунд по умолчанию (наносекунды)
DEFAULT_CLOCK_PRECISION: Final[int] = 9

# Минимальная ширина целой части часов, минут и секунд
FIELD_WIDTH: Final[int] = 2

MINUTES_PER_HOUR: Final[int] = 60


# =============================================================================
# CLOCK MODEL
# =============================================================================


class Clock(BaseModel):
    """Тройка (hours, minutes, seconds); seconds — высокоточное значение."""

    hours: int = Field(..., description="Часы (не ограничены сверху)")
    minutes: int = Field(..., description="Минуты")
    seconds: Decimal = Field(..., description="Секунды с дробной частью")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, hours: int, minutes: int, seconds: DecimalLike, **data) -> None:
        super().__init__(hours=hours, minutes=minutes, seconds=to_decimal(seconds), **data)

    # -------------------------------------------------------------------------
    # Нормализующие конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_seconds(cls, total: DecimalLike) -> "Clock":
        """
        Нормализация общего количества секунд.

        hm = floor(S) // 60
        s  = S - hm * 60          (сохраняет дробную часть)
        h, m = divmod(hm, 60)

        Examples:
            >>> Clock.from_seconds(90.5)
            Clock(hours=0, minutes=1, seconds=Decimal('30.5'))
        """
        s_total = to_decimal(total)
        hm = floor(s_total) // SECONDS_PER_MINUTE
        secs = subtract(s_total, Decimal(hm * SECONDS_PER_MINUTE))
        h, m = divmod(hm, MINUTES_PER_HOUR)
        logger.trace(f"Clock.from_seconds({s_total}) -> {h}h {m}m {secs}s")
        return cls(h, m, secs)

    @classmethod
    def from_duration(cls, d: Duration) -> "Clock":
        return cls.from_seconds(d.seconds())

    @classmethod
    def from_parts(cls, int_seconds: int, frac: float) -> "Clock":
        """Нормализация из целых секунд и дробной части (double)."""
        return cls.from_seconds(from_parts(int_seconds, frac))

    @classmethod
    def zero(cls) -> "Clock":
        return ZERO_CLOCK

    # -------------------------------------------------------------------------
    # Аксессоры
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.hours == 0 and self.minutes == 0 and self.seconds == 0

    def total_seconds(self) -> Decimal:
        """(h * 60 + m) * 60 + s"""
        hm = self.hours * MINUTES_PER_HOUR + self.minutes
        return add(Decimal(hm * SECONDS_PER_MINUTE), self.seconds)

    def whole_seconds(self) -> int:
        """Поле seconds без дробной части."""
        return trunc(self.seconds)

    def milli_seconds(self) -> int:
        """Дробная часть секунд в миллисекундах (усечение)."""
        return trunc(scale(fraction(self.seconds), MILLIS_PER_SECOND))

    def nano_seconds(self) -> int:
        """Дробная часть секунд в наносекундах (усечение)."""
        return trunc(scale(fraction(self.seconds), NANOS_PER_SECOND))

    def to_duration(self) -> Duration:
        return Duration.from_si_seconds(self.total_seconds())

    # -------------------------------------------------------------------------
    # Округление и форматирование
    # -------------------------------------------------------------------------

    def round_to_prec(self, prec: int = DEFAULT_CLOCK_PRECISION) -> "Clock":
        """
        Округление поля seconds до prec знаков.

        Часы и минуты не затрагиваются; результат не нормализуется
        (59.9999999999 при prec=9 даёт 60.000000000).
        """
        return Clock(self.hours, self.minutes, round_to(self.seconds, prec))

    def show(self, prec: int = DEFAULT_CLOCK_PRECISION) -> str:
        """
        HH:MM:SS[.fraction]

        Examples:
            >>> Clock(1, 2, 3).show(0)
            '01:02:03'
            >>> Clock(0, 1, 30.5).show(3)
            '00:01:30.500'
        """
        return (
            f"{str(self.hours).zfill(FIELD_WIDTH)}:{str(self.minutes).zfill(FIELD_WIDTH)}"
            f":{to_fixed(self.seconds, prec, int_width=FIELD_WIDTH)}"
        )

    def __str__(self) -> str:
        return self.show()

    # -------------------------------------------------------------------------
    # Сравнение и арифметика
    # -------------------------------------------------------------------------

    def compare(self, other: "Clock") -> int:
        """Трёхзначное сравнение по total_seconds(): -1, 0 или 1."""
        a, b = self.total_seconds(), other.total_seconds()
        return (a > b) - (a < b)

    def __lt__(self, other):
        if not isinstance(other, Clock):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Clock):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Clock):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Clock):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other):
        """Покомпонентное сложение без нормализации."""
        if not isinstance(other, Clock):
            return NotImplemented
        return Clock(
            self.hours + other.hours,
            self.minutes + other.minutes,
            add(self.seconds, other.seconds),
        )


ZERO_CLOCK: Final[Clock] = Clock(0, 0, 0)
