"""
JSON Schema Contract Validators

Модуль для валидации JSON-представлений value-типов civiltime согласно
формальным JSON Schema контрактам. Использует библиотеку jsonschema.

JSON-представление — model_dump(mode="json") соответствующей модели;
для Weekday — полное английское название.

Схемы (civiltime/core/contracts/schema/):
- date.json
- clock.json
- duration.json
- timestamp.json
- weekday.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы, поставляемые вместе с пакетом.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'clock')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class DateValidator(ContractValidator):
    """
    Контракт Date: объект {year, month, day} из целых чисел.

    Диапазоны полей не ограничиваются: weekdate хранит номер недели
    в month, а сложение дат не нормализует поля.
    """

    def __init__(self):
        super().__init__("date")


class ClockValidator(ContractValidator):
    """
    Контракт Clock: {hours, minutes, seconds}; seconds — decimal-строка.

    minutes/seconds не ограничены 0..59, так как сумма двух Clock
    не нормализуется.
    """

    def __init__(self):
        super().__init__("clock")


class DurationValidator(ContractValidator):
    """Контракт Duration: {secs} — знаковая decimal-строка секунд СИ."""

    def __init__(self):
        super().__init__("duration")


class TimestampValidator(ContractValidator):
    """Контракт Timestamp: {secs} — decimal-строка секунд от эпохи Unix."""

    def __init__(self):
        super().__init__("timestamp")


class WeekdayValidator(ContractValidator):
    """Контракт Weekday: одно из семи полных английских названий."""

    def __init__(self):
        super().__init__("weekday")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_date(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления Date.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DateValidator().validate(data)


def validate_clock(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления Clock.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ClockValidator().validate(data)


def validate_duration(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления Duration.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DurationValidator().validate(data)


def validate_timestamp(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-представления Timestamp.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TimestampValidator().validate(data)


def validate_weekday(data: str) -> None:
    """
    Валидация JSON-представления Weekday (полное название).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    WeekdayValidator().validate(data)
