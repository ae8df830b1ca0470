"""
DenominationTable: Таблица номиналов монет и банкнот

Неизменяемый упорядоченный набор положительных целых номиналов,
выраженных в минимальной единице валюты.

Таблица передаётся в калькулятор сдачи как конфигурация (constructor
parameter), поэтому альтернативные системы номиналов можно подставлять
без изменения ядра.

ОГРАНИЧЕНИЕ: greedy-разложение оптимально только для канонических систем
(1-5-10-20-50-...). Для неканонической таблицы (например, 1, 3, 4) результат
остаётся точным, но может содержать больше единиц, чем минимально возможно.
"""

from typing import Final, Iterator

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# НОМИНАЛЫ ПО УМОЛЧАНИЮ
# =============================================================================
# Доступные монеты и банкноты (минимальные единицы валюты)
DEFAULT_CURRENCY_UNITS: Final[tuple[int, ...]] = (
    1,
    5,
    10,
    20,
    50,
    100,
    500,
    1000,
    2000,
    5000,
)

# Наименьший номинал обязан быть 1: иначе не каждая сумма представима точно
REQUIRED_SMALLEST_UNIT: Final[int] = 1


# =============================================================================
# DENOMINATION TABLE
# =============================================================================


class DenominationTable(BaseModel):
    """
    Таблица номиналов.

    Immutable модель (frozen=True). Номиналы хранятся строго по убыванию,
    независимо от порядка, в котором были переданы.
    """

    units: tuple[int, ...] = Field(
        ..., min_length=1, description="Номиналы по убыванию (минимальные единицы)"
    )

    model_config = {"frozen": True}

    @field_validator("units")
    @classmethod
    def validate_units(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Положительные, уникальные, с единичным номиналом; сортировка по убыванию"""
        for unit in v:
            if unit <= 0:
                raise ValueError(f"Denomination must be a positive integer, got {unit}")

        if len(set(v)) != len(v):
            raise ValueError(f"Denominations must be unique, got {list(v)}")

        if min(v) != REQUIRED_SMALLEST_UNIT:
            raise ValueError(
                f"Smallest denomination must be {REQUIRED_SMALLEST_UNIT}, got {min(v)}"
            )

        return tuple(sorted(v, reverse=True))

    @classmethod
    def from_string(cls, raw: str) -> "DenominationTable":
        """
        Разбор таблицы из строки вида "1,5,10,20".

        Args:
            raw: Номиналы через запятую

        Returns:
            DenominationTable

        Raises:
            ValueError: Если строка пустая или содержит не целые числа
        """
        tokens = [token.strip() for token in raw.split(",") if token.strip()]
        if not tokens:
            raise ValueError("Denominations string is empty")

        try:
            units = tuple(int(token) for token in tokens)
        except ValueError:
            raise ValueError(
                f"Denominations must be integers separated by commas, got {raw!r}"
            )

        return cls(units=units)

    @property
    def largest(self) -> int:
        """Наибольший номинал"""
        return self.units[0]

    @property
    def smallest(self) -> int:
        """Наименьший номинал"""
        return self.units[-1]

    def ascending(self) -> tuple[int, ...]:
        """Номиналы по возрастанию"""
        return tuple(reversed(self.units))

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __contains__(self, unit: object) -> bool:
        return unit in self.units


# Глобальная таблица по умолчанию (read-only)
DEFAULT_DENOMINATION_TABLE: Final[DenominationTable] = DenominationTable(
    units=DEFAULT_CURRENCY_UNITS
)
