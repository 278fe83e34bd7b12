"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация JSON-представлений value-типов (model_dump(mode="json"))
- Детекция нарушений required полей, типов и enum
- Обратная загрузка через model_validate
"""

import pytest
from jsonschema import ValidationError

from civiltime.core.contracts import (
    ClockValidator,
    DateValidator,
    DurationValidator,
    SchemaLoader,
    TimestampValidator,
    WeekdayValidator,
    validate_clock,
    validate_date,
    validate_duration,
    validate_timestamp,
    validate_weekday,
)
from civiltime.core.domain import Clock, Date, Duration, Timestamp, Weekday, easter


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-валидация схем"""

    @pytest.mark.parametrize("name", ["date", "clock", "duration", "timestamp", "weekday"])
    def test_bundled_schemas_load(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("date") is loader.load_schema("date")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("calendar")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# VALID DATA
# =============================================================================


class TestValidRepresentations:
    """JSON-представления моделей проходят валидацию"""

    def test_date(self) -> None:
        validate_date(easter(2024).model_dump(mode="json"))
        validate_date(Date(-1, 1, 1).model_dump(mode="json"))

    def test_clock(self) -> None:
        data = Clock.from_seconds("3725.25").model_dump(mode="json")
        validate_clock(data)
        assert Clock.model_validate(data) == Clock(1, 2, "5.25")

    def test_unnormalized_clock_is_still_valid(self) -> None:
        validate_clock((Clock(0, 50, 0) + Clock(0, 20, 0)).model_dump(mode="json"))

    def test_duration(self) -> None:
        data = Duration("-1.25").model_dump(mode="json")
        validate_duration(data)
        assert Duration.model_validate(data) == Duration("-1.25")

    def test_timestamp(self) -> None:
        validate_timestamp(Timestamp("1711888215.25").model_dump(mode="json"))

    @pytest.mark.parametrize("wd", list(Weekday))
    def test_weekday(self, wd: Weekday) -> None:
        validate_weekday(wd.value)


# =============================================================================
# INVALID DATA
# =============================================================================


class TestInvalidRepresentations:
    """Нарушения контрактов детектируются"""

    def test_date_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            validate_date({"year": 2024, "month": 3})

    def test_date_wrong_type(self) -> None:
        assert not DateValidator().is_valid({"year": "2024", "month": 3, "day": 31})

    def test_date_extra_field(self) -> None:
        assert not DateValidator().is_valid({"year": 2024, "month": 3, "day": 31, "tz": "UTC"})

    def test_clock_seconds_must_be_decimal_string(self) -> None:
        validator = ClockValidator()
        assert not validator.is_valid({"hours": 1, "minutes": 2, "seconds": 5.25})
        assert not validator.is_valid({"hours": 1, "minutes": 2, "seconds": "five"})

    def test_duration_nan_rejected(self) -> None:
        assert not DurationValidator().is_valid({"secs": "NaN"})

    def test_timestamp_missing_secs(self) -> None:
        errors = list(TimestampValidator().iter_errors({}))
        assert len(errors) == 1
        assert "secs" in errors[0].message

    def test_weekday_short_name_rejected(self) -> None:
        assert not WeekdayValidator().is_valid("Mon")
