"""
Integer Division — целочисленное деление с усечением к нулю

Оператор // в Python округляет к минус бесконечности. Алгоритмы,
записанные в терминах C-подобного деления (например, расчёт даты Пасхи),
требуют усечения к нулю; эти функции дают именно такую семантику.

ИНВАРИАНТ: a == tdiv(a, b) * b + tmod(a, b) для любых a и b != 0
"""


def tdiv(a: int, b: int) -> int:
    """
    Частное a / b, усечённое к нулю.

    Raises:
        ZeroDivisionError: Если b == 0

    Examples:
        >>> tdiv(7, 2)
        3
        >>> tdiv(-7, 2)
        -3
    """
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def tmod(a: int, b: int) -> int:
    """
    Остаток от деления с усечением; знак совпадает со знаком a.

    Examples:
        >>> tmod(7, 3)
        1
        >>> tmod(-7, 3)
        -1
    """
    return a - b * tdiv(a, b)
