"""
Weekday — Дни недели с ISO-нумерацией

Закрытое перечисление MON..SUN с фиксированной биекцией на 1..7
(Monday=1 … Sunday=7) и модульной арифметикой.

ВАЖНО: weekday(i) отображает остатки 0..5 на MON..SAT, а ЛЮБОЙ другой
остаток — на SUN. Оператор % в Python даёт результат в 0..6 и для
отрицательных i, поэтому на практике ветка SUN срабатывает только для 6;
ветка сохранена явной, чтобы поведение оставалось наблюдаемым в тестах.
"""

from enum import Enum
from typing import Final

from loguru import logger


# =============================================================================
# ENUMS
# =============================================================================


class Weekday(Enum):
    """
    День недели (значение — полное английское название).

    Порядок задаётся только ISO-номером; сравнение со строками не
    определено (TypeError). Текстовое представление — show().
    """

    MON = "Monday"
    TUE = "Tuesday"
    WED = "Wednesday"
    THU = "Thursday"
    FRI = "Friday"
    SAT = "Saturday"
    SUN = "Sunday"

    def __int__(self) -> int:
        return _ISO_NUMBERS[self]

    def __str__(self) -> str:
        return self.show()

    def show(self) -> str:
        """Полное английское название."""
        return self.value

    def show_short(self) -> str:
        """Первые три символа полного названия."""
        return self.value[:3]

    def compare(self, other: "Weekday") -> int:
        """Трёхзначное сравнение по ISO-номеру: -1, 0 или 1."""
        a, b = int(self), int(other)
        return (a > b) - (a < b)

    def __lt__(self, other):
        if not isinstance(other, Weekday):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Weekday):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Weekday):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Weekday):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, days):
        if isinstance(days, Weekday) or not isinstance(days, int):
            return NotImplemented
        return weekday(int(self) + days)

    def __radd__(self, days):
        return self.__add__(days)

    def __sub__(self, other):
        """
        wd - n → Weekday на n дней раньше;
        wd1 - wd2 → число дней вперёд от wd2 до wd1 (0..6).
        """
        if isinstance(other, Weekday):
            return (int(self) - int(other)) % 7
        if isinstance(other, int):
            return weekday(int(self) - other)
        return NotImplemented


_ISO_NUMBERS: Final[dict] = {
    Weekday.MON: 1,
    Weekday.TUE: 2,
    Weekday.WED: 3,
    Weekday.THU: 4,
    Weekday.FRI: 5,
    Weekday.SAT: 6,
    Weekday.SUN: 7,
}


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def weekday(i: int) -> Weekday:
    """
    День недели по ISO-номеру с модульной арифметикой.

    d = (i - 1) mod 7; 0→MON, 1→TUE, …, 5→SAT, любое другое значение → SUN.

    Examples:
        >>> weekday(1)
        <Weekday.MON: 'Monday'>
        >>> weekday(8)
        <Weekday.MON: 'Monday'>
    """
    d = (i - 1) % 7
    if d == 0:
        return Weekday.MON
    elif d == 1:
        return Weekday.TUE
    elif d == 2:
        return Weekday.WED
    elif d == 3:
        return Weekday.THU
    elif d == 4:
        return Weekday.FRI
    elif d == 5:
        return Weekday.SAT
    else:
        if d != 6:
            logger.debug(f"weekday({i}): residue {d} outside 0..6, falling back to Sunday")
        return Weekday.SUN


def iso_number(wd: Weekday) -> int:
    """ISO-номер дня недели (Monday=1 … Sunday=7)."""
    return _ISO_NUMBERS[wd]
