"""Отображение результата расчёта сдачи."""

import json

from src.change.outcome import ChargeOutcome
from src.core.contracts import validate_charge_outcome


def render_outcome(outcome: ChargeOutcome, as_json: bool = False) -> str:
    """
    Текстовое или JSON-представление результата.

    Текст: разложение по убыванию ({5: 1, 1: 4}) или сообщение об ошибке
    валидации. JSON: сериализованный ChargeOutcome, проверенный по контракту
    charge_outcome.

    Args:
        outcome: ChargeSuccess или ChargeFailure
        as_json: Вывод в формате JSON

    Returns:
        Строка для вывода

    Raises:
        jsonschema.ValidationError: Если JSON нарушает контракт charge_outcome
    """
    if as_json:
        payload = outcome.model_dump(mode="json")
        validate_charge_outcome(payload)
        return json.dumps(payload)

    if outcome.ok:
        return str(outcome.result)
    return outcome.message
