"""
Тесты для Date

Проверяет:
1. ISO-форматирование года (4 цифры, +5 цифр, -5 цифр)
2. Форматирование даты, включая недельную дату с префиксом "W"
3. Лексикографическое сравнение
4. Покомпонентное сложение без переносов
5. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from civiltime.core.domain import Date, Weekday, show_year, weekdate


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ ГОДА
# =============================================================================


class TestShowYear:
    """Тесты для show_year"""

    def test_four_digit_range(self) -> None:
        """0..9999 — ровно 4 цифры без знака"""
        assert show_year(0) == "0000"
        assert show_year(7) == "0007"
        assert show_year(2024) == "2024"
        assert show_year(9999) == "9999"

    def test_above_9999_has_plus_sign(self) -> None:
        """year > 9999 — знак '+' и минимум 5 цифр"""
        assert show_year(10000) == "+10000"
        assert show_year(123456) == "+123456"

    def test_negative_has_minus_and_five_digits(self) -> None:
        """Отрицательный год — '-' и модуль, дополненный до 5 цифр"""
        assert show_year(-1) == "-00001"
        assert show_year(-44) == "-00044"
        assert show_year(-10000) == "-10000"


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ ДАТЫ
# =============================================================================


class TestDateShow:
    """Тесты для Date.show"""

    def test_basic(self) -> None:
        assert Date(2000, 1, 1).show() == "2000-01-01"
        assert str(Date(2024, 12, 25)) == "2024-12-25"

    def test_extended_years(self) -> None:
        assert Date(10000, 1, 1).show() == "+10000-01-01"
        assert Date(-1, 1, 1).show() == "-00001-01-01"

    def test_week_prefix_uses_single_digit_day(self) -> None:
        """Префикс 'W' — день печатается одной цифрой"""
        assert Date(2024, 3, 5).show("W") == "2024-W03-5"

    def test_other_prefix_keeps_two_digit_day(self) -> None:
        """Любой другой префикс — день двумя цифрами"""
        assert Date(2024, 3, 5).show("Q") == "2024-Q03-05"
        assert Date(2024, 3, 5).show("w") == "2024-w03-05"

    def test_keyword_construction(self) -> None:
        assert Date(year=2024, month=2, day=29) == Date(2024, 2, 29)


class TestWeekdate:
    """Тесты для weekdate (номер недели в поле month)"""

    def test_week_number_in_month_slot(self) -> None:
        d = weekdate(2024, 13, Weekday.SUN)
        assert d.year == 2024
        assert d.month == 13
        assert d.day == 7

    def test_weekdate_rendering(self) -> None:
        assert weekdate(2024, 1, Weekday.MON).show("W") == "2024-W01-1"
        assert weekdate(2020, 53, Weekday.THU).show("W") == "2020-W53-4"


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestDateCompare:
    """Тесты лексикографического сравнения"""

    def test_compare_self_is_equal(self) -> None:
        for d in (Date(2000, 1, 1), Date(-5, 12, 31), Date(10000, 6, 15)):
            assert d.compare(d) == 0
            assert d == d

    def test_year_dominates(self) -> None:
        assert Date(2023, 12, 31) < Date(2024, 1, 1)
        assert Date(2024, 1, 1).compare(Date(2023, 12, 31)) == 1

    def test_month_then_day(self) -> None:
        assert Date(2024, 2, 1) > Date(2024, 1, 31)
        assert Date(2024, 2, 1) < Date(2024, 2, 2)
        assert Date(2024, 2, 2) >= Date(2024, 2, 2)
        assert Date(2024, 2, 2) <= Date(2024, 2, 2)

    def test_sorting_is_lexicographic(self) -> None:
        dates = [Date(2024, 1, 2), Date(-1, 5, 5), Date(2024, 1, 1), Date(2000, 12, 31)]
        assert sorted(dates) == [
            Date(-1, 5, 5),
            Date(2000, 12, 31),
            Date(2024, 1, 1),
            Date(2024, 1, 2),
        ]


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestDateAdd:
    """Покомпонентное сложение"""

    def test_fieldwise_addition(self) -> None:
        assert Date(2000, 1, 1) + Date(1, 2, 3) == Date(2001, 3, 4)

    def test_no_carrying(self) -> None:
        """Переполнение месяца/дня не переносится"""
        assert Date(1, 2, 3) + Date(0, 11, 30) == Date(1, 13, 33)

    def test_immutable(self) -> None:
        d = Date(2000, 1, 1)
        with pytest.raises(ValidationError):
            d.year = 2001  # type: ignore
