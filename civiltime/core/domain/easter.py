"""
Easter — Дата григорианской Пасхи (алгоритм Oudin, 1940)

Чистая функция year → Date. Все деления — целочисленные с усечением
к нулю (tdiv/tmod), а не оператор // Python: на промежуточных
отрицательных значениях floor-деление даёт другой результат.

Алгоритм проверен для положительных григорианских лет; поведение для
year <= 0 и для лет до 1583 не определено и намеренно не проверяется.
"""

from loguru import logger

from civiltime.core.domain.date import Date
from civiltime.core.math.integer_division import tdiv, tmod


def easter(year: int) -> Date:
    """
    Дата Пасхи (по григорианскому календарю) для года year.

    Args:
        year: Григорианский год (> 0)

    Returns:
        Date(year, month, day), month ∈ {3, 4}

    Examples:
        >>> easter(2024)
        Date(year=2024, month=3, day=31)
        >>> easter(2000)
        Date(year=2000, month=4, day=23)
    """
    c = tdiv(year, 100)
    n = tmod(year, 19)
    k = tdiv(c - 17, 25)

    # Эпакта: возраст луны на 1 января
    i0 = (c - tdiv(c, 4)) - tdiv(c - k, 3) + 19 * n + 15
    i1 = i0 - 30 * tdiv(i0, 30)
    i = i1 - tdiv(i1, 28) * (1 - tdiv(i1, 28) * tdiv(29, i1 + 1) * tdiv(21 - n, 11))

    # День недели пасхального полнолуния
    j0 = year + tdiv(year, 4) + i + 2 - c + tdiv(c, 4)
    j = j0 - 7 * tdiv(j0, 7)

    l = i - j
    month = 3 + tdiv(l + 40, 44)
    day = (l + 28) - 31 * tdiv(month, 4)

    logger.debug(f"easter({year}) -> {month:02d}-{day:02d}")
    return Date(year, month, day)
