"""
Amount: Денежные суммы в минимальных единицах валюты

Сумма: неотрицательное целое число минимальных единиц (например, центов).
Дробные единицы не поддерживаются.
"""

import math
import numbers
from decimal import Decimal
from typing import Annotated

from pydantic import Field

# Неотрицательная сумма в минимальных единицах
Amount = Annotated[int, Field(ge=0, description="Сумма в минимальных единицах валюты")]


def validate_amount(value: float, name: str) -> int:
    """
    Валидация суммы и нормализация к int.

    Принимаются любые числа (int, float, Decimal, Fraction, numpy-скаляры),
    если их значение целое: 100.0, Decimal("100"), Fraction(200, 2) → 100.

    Args:
        value: Проверяемая сумма
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Сумма как int

    Raises:
        ValueError: Если сумма не число, NaN/Inf, отрицательная или дробная
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise ValueError(f"{name} must be a number, got {value!r}")

    if isinstance(value, numbers.Integral):
        value = int(value)
    else:
        if not math.isfinite(value):
            raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value}")
        if value != math.floor(value):
            raise ValueError(f"{name} must be a whole number of units, got {value}")
        value = int(value)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    return value
