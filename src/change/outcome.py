"""
ChargeOutcome: Дискриминированный результат расчёта сдачи

Альтернатива исключению: try_charge() возвращает либо ChargeSuccess,
либо ChargeFailure. Поле kind различает варианты.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.core.domain.charge_result import ChargeResult


class ChargeSuccess(BaseModel):
    """Сдача рассчитана"""

    kind: Literal["success"] = "success"
    result: ChargeResult = Field(..., description="Разложение сдачи")

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return True


class ChargeFailure(BaseModel):
    """Выданной суммы недостаточно"""

    kind: Literal["failure"] = "failure"
    message: str = Field(..., min_length=1, description="Сообщение для пользователя")
    amount_charged: int = Field(..., ge=0, description="Сумма к оплате")
    amount_given: int = Field(..., ge=0, description="Выданная сумма")

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return False


ChargeOutcome = Annotated[
    Union[ChargeSuccess, ChargeFailure], Field(discriminator="kind")
]
