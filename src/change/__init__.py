"""Change: расчёт сдачи по таблице номиналов (greedy).

- ChangeCalculator: ядро с внедряемой таблицей номиналов
- ChargeValidationError: недостаточная выданная сумма
- ChargeOutcome: дискриминированный результат (success/failure)
"""

from loguru import logger

from .calculator import ChangeCalculator, charge, try_charge
from .errors import ChargeValidationError
from .outcome import ChargeFailure, ChargeOutcome, ChargeSuccess

__all__ = [
    "ChangeCalculator",
    "charge",
    "try_charge",
    "ChargeValidationError",
    "ChargeOutcome",
    "ChargeSuccess",
    "ChargeFailure",
]

# Библиотечные логи выключены, пока их не включит приложение (см. src.cli.main)
logger.disable("src.change")
