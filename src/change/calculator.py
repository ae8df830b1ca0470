"""
ChangeCalculator: Расчёт сдачи по номиналам (greedy)

По сумме к оплате и выданной сумме возвращает разложение разницы
на номиналы из таблицы с минимальным числом единиц (для канонических систем).

Алгоритм:
1. amount_charged > amount_given → ChargeValidationError
2. amount_charged == amount_given → пустой результат
3. remaining = amount_given - amount_charged
4. Для каждого номинала d по убыванию:
   - remaining < d → пропуск
   - count = remaining // d; записать count; remaining -= count * d
5. Номиналы с нулевым количеством в результат не попадают

Так как наименьший номинал таблицы равен 1, remaining всегда доходит до 0.

Без побочных эффектов (кроме debug-логов), без состояния; безопасен для
конкурентных вызовов.
"""

from typing import Optional

from loguru import logger

from src.change.errors import ChargeValidationError
from src.change.outcome import ChargeFailure, ChargeOutcome, ChargeSuccess
from src.core.domain.amounts import validate_amount
from src.core.domain.charge_result import ChargeResult
from src.core.domain.denominations import DEFAULT_DENOMINATION_TABLE, DenominationTable


class ChangeCalculator:
    """Калькулятор сдачи с внедряемой таблицей номиналов."""

    def __init__(self, table: Optional[DenominationTable] = None):
        """
        Args:
            table: таблица номиналов (default: DEFAULT_DENOMINATION_TABLE)
        """
        self.table = table or DEFAULT_DENOMINATION_TABLE

    def charge(self, amount_charged: int, amount_given: int) -> ChargeResult:
        """
        Разложение сдачи amount_given - amount_charged по номиналам.

        Args:
            amount_charged: Сумма к оплате (>= 0)
            amount_given: Выданная сумма (>= 0)

        Returns:
            ChargeResult (пустой, если сдача не нужна)

        Raises:
            ChargeValidationError: Если amount_charged > amount_given
            ValueError: Если сумма отрицательная, дробная или NaN/Inf

        Examples:
            >>> ChangeCalculator().charge(1, 10).as_dict()
            {5: 1, 1: 4}
        """
        amount_charged = validate_amount(amount_charged, "amount_charged")
        amount_given = validate_amount(amount_given, "amount_given")

        if amount_charged > amount_given:
            raise ChargeValidationError(amount_charged, amount_given)

        if amount_charged == amount_given:
            logger.debug(f"Exact amount {amount_given} given, no change due")
            return ChargeResult()

        remaining = amount_given - amount_charged
        logger.debug(f"Charging {amount_charged} from {amount_given}: change {remaining}")

        counts: dict[int, int] = {}
        for unit in self.table.units:
            if remaining < unit:
                continue

            count = remaining // unit
            counts[unit] = count
            remaining -= count * unit
            logger.debug(f"Unit {unit} x {count}, remaining {remaining}")

        return ChargeResult(counts=counts)

    def try_charge(self, amount_charged: int, amount_given: int) -> ChargeOutcome:
        """
        То же, что charge(), но без исключения при недостаточной сумме.

        Returns:
            ChargeSuccess с результатом или ChargeFailure с сообщением
        """
        try:
            result = self.charge(amount_charged, amount_given)
        except ChargeValidationError as e:
            return ChargeFailure(
                message=str(e),
                amount_charged=e.amount_charged,
                amount_given=e.amount_given,
            )
        return ChargeSuccess(result=result)


# Калькулятор по умолчанию
_DEFAULT_CALCULATOR = ChangeCalculator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def charge(amount_charged: int, amount_given: int) -> ChargeResult:
    """
    Расчёт сдачи по таблице номиналов по умолчанию.

    Raises:
        ChargeValidationError: Если amount_charged > amount_given
    """
    return _DEFAULT_CALCULATOR.charge(amount_charged, amount_given)


def try_charge(amount_charged: int, amount_given: int) -> ChargeOutcome:
    """Расчёт сдачи по таблице по умолчанию без исключения для недостаточной суммы."""
    return _DEFAULT_CALCULATOR.try_charge(amount_charged, amount_given)
