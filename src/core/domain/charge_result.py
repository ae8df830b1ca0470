"""
ChargeResult: Разложение сдачи по номиналам

Immutable Pydantic модель: разреженное отображение номинал → количество.
Внутри хранится как кортеж пар (номинал, количество), поэтому результат
нельзя изменить после создания. Номиналы с нулевым количеством не хранятся.
Порядок итерации: по убыванию номинала.

Снаружи модель принимает и сериализует обычный dict:
    ChargeResult(counts={5: 1, 1: 4})
    model_dump_json() → {"counts": {"5": 1, "1": 4}}
"""

from collections.abc import Mapping
from typing import Any, Iterator

from pydantic import (
    BaseModel,
    Field,
    FieldSerializationInfo,
    field_serializer,
    field_validator,
)


class ChargeResult(BaseModel):
    """
    Результат расчёта сдачи.

    Инвариант (для результатов калькулятора):
        total() == amount_given - amount_charged
    """

    counts: tuple[tuple[int, int], ...] = Field(
        default=(), description="Пары (номинал, количество > 0) по убыванию номинала"
    )

    model_config = {"frozen": True}

    @field_validator("counts", mode="before")
    @classmethod
    def coerce_mapping(cls, v: Any) -> Any:
        """dict номинал → количество приводится к парам"""
        if isinstance(v, Mapping):
            return tuple(v.items())
        return v

    @field_validator("counts")
    @classmethod
    def validate_counts(cls, v: tuple[tuple[int, int], ...]) -> tuple[tuple[int, int], ...]:
        """Только положительные номиналы и количества, без повторов; порядок по убыванию"""
        seen: set[int] = set()
        for unit, count in v:
            if unit <= 0:
                raise ValueError(f"Denomination must be positive, got {unit}")
            if count <= 0:
                raise ValueError(
                    f"Count for denomination {unit} must be positive, got {count}"
                )
            if unit in seen:
                raise ValueError(f"Denomination {unit} listed more than once")
            seen.add(unit)
        return tuple(sorted(v, reverse=True))

    @field_serializer("counts")
    def serialize_counts(
        self, v: tuple[tuple[int, int], ...], info: FieldSerializationInfo
    ) -> dict:
        # JSON-ключи всегда строки
        if info.mode_is_json():
            return {str(unit): count for unit, count in v}
        return dict(v)

    def is_empty(self) -> bool:
        """True если сдача не требуется"""
        return not self.counts

    def total(self) -> int:
        """Сумма сдачи: Σ номинал × количество"""
        return sum(unit * count for unit, count in self.counts)

    def piece_count(self) -> int:
        """Общее число монет и банкнот"""
        return sum(count for _, count in self.counts)

    def items(self) -> list[tuple[int, int]]:
        """Пары (номинал, количество) по убыванию номинала"""
        return list(self.counts)

    def get(self, unit: int, default: int = 0) -> int:
        """Количество для номинала (0, если номинал не использован)"""
        return self.as_dict().get(unit, default)

    def as_dict(self) -> dict[int, int]:
        """Копия разложения как обычный dict"""
        return dict(self.counts)

    def __getitem__(self, unit: int) -> int:
        return self.as_dict()[unit]

    def __contains__(self, unit: object) -> bool:
        return any(unit == u for u, _ in self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(unit for unit, _ in self.counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return self.as_dict() == dict(other)
        if isinstance(other, ChargeResult):
            return self.counts == other.counts
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.counts)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{unit}: {count}" for unit, count in self.counts) + "}"
