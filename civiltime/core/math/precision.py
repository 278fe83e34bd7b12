"""
Precision — узкий интерфейс high-precision decimal арифметики

Единственная точка, через которую value-типы (Clock, Duration, Timestamp)
работают с высокоточным значением секунд. Реализация — decimal.Decimal;
любой другой decimal-тип, поддерживающий операции ниже, подходит.

Операции интерфейса:
- Конструирование из int/float/str/Decimal
- Truncate / floor / fractional part
- Округление до N знаков после запятой
- Fixed-point форматирование с минимальной шириной целой части
- Арифметика и сравнение (через операторы Decimal)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в value-типы (ValueError на границе)
2. Вычисления выполняются в localcontext — глобальный контекст потока не меняется
3. Все операции детерминированы и воспроизводимы
4. Округление до N знаков точно при любой величине целой части
"""

import math
from dataclasses import dataclass
from decimal import ROUND_DOWN, ROUND_FLOOR, ROUND_HALF_EVEN, Decimal, localcontext
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество значащих цифр в контексте вычислений.
# 60 цифр покрывают наносекунды на масштабах в миллиарды лет.
DECIMAL_CONTEXT_PRECISION: Final[int] = 60

# Максимальное число дробных знаков, которое имеет смысл отображать
MAX_FRACTION_DIGITS: Final[int] = 30

# Типы, из которых допускается конструирование
DecimalLike = Union[Decimal, int, float, str]


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrecisionConfig:
    """
    Конфигурация decimal-контекста.

    Передаётся функциям модуля параметром config; value-типы используют
    DEFAULT_PRECISION_CONFIG.
    """

    context_precision: int = DECIMAL_CONTEXT_PRECISION
    rounding: str = ROUND_HALF_EVEN


DEFAULT_PRECISION_CONFIG: Final[PrecisionConfig] = PrecisionConfig()


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Конверсия значения в высокоточный Decimal.

    float конвертируется через repr (кратчайшее десятичное представление),
    поэтому 30.5 → Decimal('30.5'), а не двоичный хвост.

    Args:
        value: int, float, str или Decimal

    Returns:
        Конечный Decimal

    Raises:
        ValueError: Если значение NaN/Inf или строка не парсится
        TypeError: Если тип не поддерживается (в т.ч. bool)

    Examples:
        >>> to_decimal(30.5)
        Decimal('30.5')
        >>> to_decimal(7)
        Decimal('7')
    """
    if isinstance(value, bool):
        raise TypeError(f"bool is not a valid seconds value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Value contains NaN/Inf: {value}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value)
        except ArithmeticError as e:
            raise ValueError(f"Cannot parse decimal value: {value!r}") from e
    else:
        raise TypeError(f"Unsupported decimal source type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Value contains NaN/Inf: {value}")

    return result


def from_parts(
    int_seconds: int, fraction: float, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG
) -> Decimal:
    """
    Конструирование из целой части и дробной части (double).

    Args:
        int_seconds: Целые секунды
        fraction: Дробная часть (обычно в [0, 1))
        config: Параметры decimal-контекста

    Returns:
        int_seconds + fraction как Decimal
    """
    with localcontext() as ctx:
        ctx.prec = config.context_precision
        return Decimal(int_seconds) + to_decimal(fraction)


# =============================================================================
# TRUNCATE / FLOOR / FRACTION
# =============================================================================


def trunc(value: Decimal) -> int:
    """Целая часть с отбрасыванием дробной (к нулю)."""
    return int(value.to_integral_value(rounding=ROUND_DOWN))


def floor(value: Decimal) -> int:
    """Наибольшее целое, не превышающее value (к минус бесконечности)."""
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def fraction(value: Decimal, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG) -> Decimal:
    """
    Дробная часть value (знак совпадает со знаком value).

    Examples:
        >>> fraction(Decimal('30.25'))
        Decimal('0.25')
        >>> fraction(Decimal('-1.5'))
        Decimal('-0.5')
    """
    with localcontext() as ctx:
        ctx.prec = config.context_precision
        return value - Decimal(trunc(value))


def add(a: Decimal, b: Decimal, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG) -> Decimal:
    """Сумма в высокоточном контексте."""
    with localcontext() as ctx:
        ctx.prec = config.context_precision
        return a + b


def subtract(
    a: Decimal, b: Decimal, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG
) -> Decimal:
    """Разность в высокоточном контексте."""
    with localcontext() as ctx:
        ctx.prec = config.context_precision
        return a - b


def scale(
    value: Decimal, factor: Decimal, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG
) -> Decimal:
    """Умножение value на масштабный Decimal-коэффициент без потери точности."""
    with localcontext() as ctx:
        ctx.prec = config.context_precision
        return value * factor


def divide(
    value: Decimal, divisor: Decimal, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG
) -> Decimal:
    """Деление в контексте config.context_precision значащих цифр."""
    with localcontext() as ctx:
        ctx.prec = config.context_precision
        return value / divisor


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def _check_prec(prec: int) -> None:
    if prec < 0:
        raise ValueError(f"Precision must be non-negative, got {prec}")
    if prec > MAX_FRACTION_DIGITS:
        raise ValueError(
            f"Precision {prec} exceeds maximum of {MAX_FRACTION_DIGITS} fraction digits"
        )


def round_to(
    value: Decimal, prec: int, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG
) -> Decimal:
    """
    Округление до prec знаков после запятой (по умолчанию banker's rounding).

    Контекст расширяется до числа цифр результата, поэтому значения
    с целой частью длиннее config.context_precision не вызывают
    InvalidOperation.

    Args:
        value: Исходное значение
        prec: Количество дробных знаков (>= 0)
        config: Параметры decimal-контекста (режим округления)

    Returns:
        Округлённое значение с ровно prec дробными знаками

    Raises:
        ValueError: Если prec < 0 или prec > MAX_FRACTION_DIGITS
    """
    _check_prec(prec)
    with localcontext() as ctx:
        ctx.prec = max(config.context_precision, value.adjusted() + prec + 2)
        return value.quantize(Decimal(1).scaleb(-prec), rounding=config.rounding)


def round_int(value: Decimal, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG) -> int:
    """Округление до ближайшего целого (по умолчанию banker's rounding)."""
    return int(value.to_integral_value(rounding=config.rounding))


# =============================================================================
# FIXED-POINT ФОРМАТИРОВАНИЕ
# =============================================================================


def to_fixed(
    value: Decimal,
    prec: int,
    int_width: int = 1,
    config: PrecisionConfig = DEFAULT_PRECISION_CONFIG,
) -> str:
    """
    Fixed-point строка с ровно prec дробными знаками.

    Целая часть дополняется нулями слева до int_width цифр; знак '-'
    в ширину не входит. При prec == 0 десятичная точка не выводится.

    Args:
        value: Значение
        prec: Количество дробных знаков (>= 0)
        int_width: Минимальное количество цифр целой части
        config: Параметры decimal-контекста (режим округления)

    Returns:
        Строка вида '05.250'

    Examples:
        >>> to_fixed(Decimal('5.25'), 3, int_width=2)
        '05.250'
        >>> to_fixed(Decimal('-1.5'), 0)
        '-2'
    """
    rounded = round_to(value, prec, config)
    sign = "-" if rounded < 0 else ""
    digits = format(rounded.copy_abs(), "f")

    if "." in digits:
        int_part, frac_part = digits.split(".", 1)
    else:
        int_part, frac_part = digits, ""

    frac_part = frac_part.ljust(prec, "0")[:prec]
    text = sign + int_part.zfill(int_width)
    if prec > 0:
        text += "." + frac_part
    return text


def to_fixed_trimmed(
    value: Decimal, max_prec: int, config: PrecisionConfig = DEFAULT_PRECISION_CONFIG
) -> str:
    """
    Fixed-point строка с не более чем max_prec дробными знаками.

    Хвостовые нули дробной части отбрасываются; если дробная часть
    обнулилась, точка не выводится.

    Examples:
        >>> to_fixed_trimmed(Decimal('1.500'), 9)
        '1.5'
        >>> to_fixed_trimmed(Decimal('2'), 9)
        '2'
    """
    text = to_fixed(value, max_prec, config=config)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text
