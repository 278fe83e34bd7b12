"""
Тесты для Weekday

Проверяет:
1. ISO-нумерацию (Monday=1 … Sunday=7)
2. weekday(i) с модульной арифметикой, включая отрицательные i
3. Арифметику wd ± n и wd1 - wd2
4. Форматирование и сравнение
"""

import pytest

from civiltime.core.domain import Weekday, iso_number, weekday

ALL_WEEKDAYS = list(Weekday)


class TestIsoNumbering:
    """Тесты для int(wd) и weekday(i)"""

    def test_int_mapping(self) -> None:
        assert [int(wd) for wd in ALL_WEEKDAYS] == [1, 2, 3, 4, 5, 6, 7]
        assert iso_number(Weekday.SUN) == 7

    def test_roundtrip(self) -> None:
        for wd in ALL_WEEKDAYS:
            assert weekday(int(wd)) is wd

    def test_wraps_past_seven(self) -> None:
        assert weekday(8) == Weekday.MON
        assert weekday(14) == Weekday.SUN
        assert weekday(15) == Weekday.MON

    def test_zero_and_negative(self) -> None:
        """
        Python % даёт остаток в 0..6 и для отрицательных i, поэтому
        отрицательные номера отображаются на правильные дни, а не на SUN.
        """
        assert weekday(0) == Weekday.SUN
        assert weekday(-1) == Weekday.SAT
        assert weekday(-5) == Weekday.TUE
        assert weekday(-6) == Weekday.MON
        assert weekday(-7) == Weekday.SUN


class TestWeekdayArithmetic:
    """Тесты для wd + n, wd - n, wd1 - wd2"""

    @pytest.mark.parametrize("wd", ALL_WEEKDAYS)
    def test_add_seven_is_identity(self, wd: Weekday) -> None:
        assert wd + 7 == wd
        assert wd - 7 == wd

    def test_mon_minus_one_is_sun(self) -> None:
        assert Weekday.MON - 1 == Weekday.SUN

    def test_add_days(self) -> None:
        assert Weekday.FRI + 3 == Weekday.MON
        assert 2 + Weekday.SAT == Weekday.MON
        assert Weekday.WED + 0 == Weekday.WED

    def test_difference_is_days_forward(self) -> None:
        assert Weekday.FRI - Weekday.MON == 4
        assert Weekday.MON - Weekday.FRI == 3
        assert Weekday.SUN - Weekday.SUN == 0

    def test_difference_inverts_addition(self) -> None:
        for a in ALL_WEEKDAYS:
            for b in ALL_WEEKDAYS:
                assert b + (a - b) == a


class TestWeekdayShow:
    """Тесты форматирования"""

    def test_full_names(self) -> None:
        assert Weekday.MON.show() == "Monday"
        assert str(Weekday.WED) == "Wednesday"

    def test_short_names(self) -> None:
        assert [wd.show_short() for wd in ALL_WEEKDAYS] == [
            "Mon",
            "Tue",
            "Wed",
            "Thu",
            "Fri",
            "Sat",
            "Sun",
        ]


class TestWeekdayCompare:
    """Сравнение по ISO-номеру, а не по алфавиту"""

    def test_iso_ordering(self) -> None:
        assert Weekday.MON < Weekday.SUN
        assert Weekday.SAT > Weekday.FRI
        assert Weekday.THU >= Weekday.THU
        # Алфавитно "Friday" < "Monday", но по ISO наоборот
        assert Weekday.FRI > Weekday.MON

    def test_compare(self) -> None:
        assert Weekday.TUE.compare(Weekday.TUE) == 0
        assert Weekday.TUE.compare(Weekday.WED) == -1
        assert Weekday.SUN.compare(Weekday.MON) == 1

    def test_sorted(self) -> None:
        shuffled = [Weekday.SUN, Weekday.WED, Weekday.MON, Weekday.SAT]
        assert sorted(shuffled) == [Weekday.MON, Weekday.WED, Weekday.SAT, Weekday.SUN]

    def test_no_ordering_against_strings(self) -> None:
        """Строки не сравниваются с днями недели (нет алфавитного порядка)"""
        with pytest.raises(TypeError):
            Weekday.MON < "Tuesday"
        with pytest.raises(TypeError):
            "Friday" > Weekday.MON
        assert Weekday.MON != "Monday"
        assert Weekday("Monday") is Weekday.MON
