"""
Date — Поля календарной даты (year/month/day)

Immutable Pydantic модель без календарных правил: валидность даты
(число дней в месяце, високосность) — забота календарного слоя.

Соглашение: weekdate() кладёт номер ISO-недели в поле month, а номер
ISO-дня недели в поле day. Отдельного типа для недельной даты нет.

Форматы:
- YYYY-MM-DD для 0 <= year <= 9999
- +YYYYY-MM-DD для year > 9999
- -YYYYY-MM-DD для year < 0
- YYYY-Www-D при month_prefix="W"
"""

from pydantic import BaseModel, Field

from civiltime.core.domain.weekday import Weekday


# =============================================================================
# YEAR FORMATTING
# =============================================================================


def show_year(year: int) -> str:
    """
    ISO-представление года.

    Examples:
        >>> show_year(2000)
        '2000'
        >>> show_year(10000)
        '+10000'
        >>> show_year(-1)
        '-00001'
    """
    if year < 0:
        return "-" + str(-year).zfill(5)
    if year > 9999:
        return "+" + str(year).zfill(5)
    return str(year).zfill(4)


# =============================================================================
# DATE MODEL
# =============================================================================


class Date(BaseModel):
    """
    Дата как тройка полей (year, month, day), все 1-based.

    Сравнение лексикографическое по (year, month, day).
    Сложение покомпонентное, без переносов между полями.
    """

    year: int = Field(..., description="Год (может быть отрицательным)")
    month: int = Field(..., description="Месяц или номер ISO-недели")
    day: int = Field(..., description="День месяца или номер ISO-дня недели")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, year: int, month: int, day: int, **data) -> None:
        super().__init__(year=year, month=month, day=day, **data)

    def show(self, month_prefix: str = "") -> str:
        """
        Текстовое представление даты.

        Args:
            month_prefix: Префикс перед месяцем; "W" для недельной даты
                (день тогда печатается одной цифрой)

        Returns:
            Строка вида '2024-03-31' или '2024-W13-7'
        """
        day_width = 1 if month_prefix == "W" else 2
        return (
            f"{show_year(self.year)}-{month_prefix}{str(self.month).zfill(2)}"
            f"-{str(self.day).zfill(day_width)}"
        )

    def __str__(self) -> str:
        return self.show()

    def compare(self, other: "Date") -> int:
        """Трёхзначное лексикографическое сравнение: -1, 0 или 1."""
        a = (self.year, self.month, self.day)
        b = (other.year, other.month, other.day)
        return (a > b) - (a < b)

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other):
        """Покомпонентное сложение (структурное, не календарное)."""
        if not isinstance(other, Date):
            return NotImplemented
        return Date(
            self.year + other.year,
            self.month + other.month,
            self.day + other.day,
        )


def weekdate(year: int, week: int, wd: Weekday) -> Date:
    """
    Недельная дата: номер недели хранится в поле month.

    Args:
        year: ISO-год
        week: Номер ISO-недели (1..53)
        wd: День недели

    Returns:
        Date(year, week, int(wd))
    """
    return Date(year, week, int(wd))
