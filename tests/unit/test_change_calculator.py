"""
Тесты для ChangeCalculator (greedy разложение сдачи)

Проверяет:
1. Конкретные сценарии разложения
2. Недостаточную сумму (ChargeValidationError)
3. Инвариант суммы и разреженность результата
4. Детерминизм greedy: count = remaining // unit на каждом шаге
5. Внедрение альтернативной таблицы номиналов
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.change import ChangeCalculator, ChargeValidationError, charge
from src.core.domain import DEFAULT_DENOMINATION_TABLE, ChargeResult, DenominationTable


# =============================================================================
# СЦЕНАРИИ
# =============================================================================


class TestChargeScenarios:
    """Тесты конкретных сценариев"""

    def test_exact_amount_gives_empty_result(self) -> None:
        """Точная сумма: сдача не нужна"""
        result = charge(100, 100)
        assert result == {}
        assert result.is_empty()

    def test_single_banknote(self) -> None:
        """Сдача одной банкнотой"""
        assert charge(0, 100) == {100: 1}
        assert charge(50, 100) == {50: 1}

    def test_mixed_units(self) -> None:
        """10 - 1 = 9 → 5 + 4×1"""
        assert charge(1, 10) == {5: 1, 1: 4}

    def test_large_change(self) -> None:
        """5000 - 7 = 4993 → 2×2000 + 1×500 + 4×100 + 1×50 + 2×20 + 3×1"""
        result = charge(7, 5000)
        assert result.as_dict() == {2000: 2, 500: 1, 100: 4, 50: 1, 20: 2, 1: 3}
        assert result.total() == 4993
        assert result.piece_count() == 13

    def test_amount_above_largest_unit(self) -> None:
        """Наибольший номинал используется многократно"""
        assert charge(0, 12345) == {5000: 2, 2000: 1, 100: 3, 20: 2, 5: 1}

    def test_zero_amounts(self) -> None:
        """0 из 0: пустой результат"""
        assert charge(0, 0) == {}

    def test_integral_floats_accepted(self) -> None:
        """Целые float приводятся к int"""
        result = charge(1.0, 10.0)
        assert result == {5: 1, 1: 4}
        assert all(isinstance(count, int) for count in result.as_dict().values())

    def test_decimal_and_fraction_accepted(self) -> None:
        """Decimal и Fraction с целым значением: обычные числовые суммы"""
        assert charge(Decimal(1), Fraction(20, 2)) == {5: 1, 1: 4}


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestInsufficientAmount:
    """Тесты недостаточной выданной суммы"""

    def test_raises_validation_error(self) -> None:
        """charged > given → ChargeValidationError с обеими суммами"""
        with pytest.raises(ChargeValidationError) as exc_info:
            charge(3, 2)

        message = str(exc_info.value)
        assert "2" in message
        assert "3" in message
        assert message == "Given amount 2 is too little to charge 3."

    def test_error_carries_amounts(self) -> None:
        """Исключение содержит исходные суммы"""
        with pytest.raises(ChargeValidationError) as exc_info:
            charge(150, 100)

        assert exc_info.value.amount_charged == 150
        assert exc_info.value.amount_given == 100

    def test_validation_error_is_value_error(self) -> None:
        """ChargeValidationError: подкласс ValueError"""
        with pytest.raises(ValueError, match="too little"):
            charge(1, 0)

    def test_negative_amount_rejected(self) -> None:
        """Отрицательная сумма: не ошибка валидации сдачи"""
        with pytest.raises(ValueError, match="must be non-negative") as exc_info:
            charge(-1, 10)
        assert not isinstance(exc_info.value, ChargeValidationError)

    def test_fractional_amount_rejected(self) -> None:
        """Дробные единицы не поддерживаются"""
        with pytest.raises(ValueError, match="whole number"):
            charge(0.5, 10)


# =============================================================================
# ИНВАРИАНТЫ
# =============================================================================


class TestInvariants:
    """Тесты инвариантов разложения"""

    @pytest.mark.parametrize(
        "amount_charged,amount_given",
        [(0, 1), (3, 17), (99, 1000), (1, 5000), (0, 8888), (123, 98765)],
    )
    def test_sum_invariant(self, amount_charged: int, amount_given: int) -> None:
        """Σ номинал × количество == given - charged"""
        result = charge(amount_charged, amount_given)
        assert result.total() == amount_given - amount_charged

    @pytest.mark.parametrize("amount_given", [1, 4, 9, 44, 499, 4999, 9999])
    def test_sparsity(self, amount_given: int) -> None:
        """Нулевые количества не попадают в результат"""
        result = charge(0, amount_given)
        assert all(count > 0 for count in result.as_dict().values())
        assert set(result) <= set(DEFAULT_DENOMINATION_TABLE.units)

    def test_greedy_counts(self) -> None:
        """На каждом шаге count == remaining // unit"""
        remaining = 7777
        result = charge(0, remaining)

        for unit in DEFAULT_DENOMINATION_TABLE.units:
            expected = remaining // unit
            assert result.get(unit) == expected
            remaining -= expected * unit

        assert remaining == 0

    def test_result_order_descending(self) -> None:
        """Номиналы в результате по убыванию"""
        units = list(charge(7, 5000))
        assert units == sorted(units, reverse=True)

    def test_deterministic(self) -> None:
        """Повторный вызов даёт тот же результат"""
        assert charge(13, 4321) == charge(13, 4321)

    def test_fresh_result_per_call(self) -> None:
        """Каждый вызов создаёт новый результат"""
        first = charge(0, 100)
        second = charge(0, 100)
        assert first is not second


# =============================================================================
# ВНЕДРЕНИЕ ТАБЛИЦЫ
# =============================================================================


class TestInjectedTable:
    """Тесты альтернативной таблицы номиналов"""

    def test_default_table_used(self) -> None:
        """По умолчанию используется стандартная таблица"""
        assert ChangeCalculator().table == DEFAULT_DENOMINATION_TABLE

    def test_custom_table(self) -> None:
        """Таблица 1, 2, 25: свои номиналы"""
        calculator = ChangeCalculator(DenominationTable(units=(1, 2, 25)))
        assert calculator.charge(0, 54) == {25: 2, 2: 2}

    def test_non_canonical_table_exact_but_not_minimal(self) -> None:
        """
        Неканоническая система 1, 3, 4: greedy даёт 4+1+1 (3 единицы),
        хотя 3+3 (2 единицы) короче. Результат точный, но не минимальный.
        """
        calculator = ChangeCalculator(DenominationTable(units=(1, 3, 4)))
        result = calculator.charge(0, 6)
        assert result == {4: 1, 1: 2}
        assert result.total() == 6
        assert result.piece_count() == 3

    def test_custom_table_validation_error(self) -> None:
        """Недостаточная сумма с любой таблицей"""
        calculator = ChangeCalculator(DenominationTable(units=(1, 10)))
        with pytest.raises(ChargeValidationError):
            calculator.charge(11, 10)

    def test_returns_charge_result(self) -> None:
        """Тип результата"""
        assert isinstance(ChangeCalculator().charge(0, 1), ChargeResult)


class TestResultImmutability:
    """Результат калькулятора нельзя испортить после возврата"""

    def test_counts_cannot_be_mutated(self) -> None:
        """Попытка записать в counts не меняет сумму"""
        result = charge(0, 100)
        with pytest.raises(TypeError):
            result.counts[100] = 0  # type: ignore[index]
        assert result == {100: 1}
        assert result.total() == 100

    def test_result_hashable(self) -> None:
        """Результаты хешируются и равны при равных входах"""
        assert hash(charge(0, 5)) == hash(charge(10, 15))
