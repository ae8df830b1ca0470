"""Приведение текстового ввода к суммам (граница CLI).

Ядро никогда не разбирает строки: некорректный ввод отклоняется здесь,
до вызова калькулятора.
"""

from pydantic import TypeAdapter, ValidationError

from src.core.domain.amounts import Amount

_AMOUNT_ADAPTER: TypeAdapter[int] = TypeAdapter(Amount)


def parse_amount(raw: str, name: str = "amount") -> int:
    """
    Разбор суммы из строки.

    Args:
        raw: Текст суммы (например, "5000")
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Неотрицательная сумма в минимальных единицах

    Raises:
        ValueError: Если строка не является неотрицательным целым числом
    """
    try:
        return _AMOUNT_ADAPTER.validate_python(raw.strip())
    except ValidationError:
        raise ValueError(f"{name} must be a non-negative whole number, got {raw!r}")
