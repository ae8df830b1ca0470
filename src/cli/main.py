"""CLI: change-calculator AMOUNT_CHARGED AMOUNT_GIVEN

Коэрсия ввода, вызов ядра и вывод результата. Форматируется только
ChargeValidationError (сообщение или JSON ChargeFailure в stdout, код
выхода 0); любые другие исключения пробрасываются.
"""

import sys
from typing import Optional

import typer
from loguru import logger

from src.change.calculator import ChangeCalculator
from src.cli.amounts import parse_amount
from src.cli.render import render_outcome
from src.core.domain.denominations import DenominationTable

app = typer.Typer(add_completion=False)


def configure_logging(level: str) -> None:
    """Один sink в stderr; stdout остаётся для результата."""
    logger.remove()
    logger.enable("src.change")
    try:
        logger.add(sys.stderr, level=level.upper())
    except ValueError:
        raise typer.BadParameter(f"Unknown log level {level!r}", param_hint="--log-level")


@app.command()
def main(
    amount_charged: str = typer.Argument(..., help="Сумма к оплате (минимальные единицы)"),
    amount_given: str = typer.Argument(..., help="Выданная сумма (минимальные единицы)"),
    denominations: Optional[str] = typer.Option(
        None,
        "--denominations",
        envvar="CHANGE_DENOMINATIONS",
        help="Номиналы через запятую (по умолчанию 1,5,10,20,50,100,500,1000,2000,5000)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Вывод в формате JSON"),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="CHANGE_LOG_LEVEL"),
):
    """
    Рассчитывает сдачу: разложение AMOUNT_GIVEN - AMOUNT_CHARGED по номиналам.
    """
    configure_logging(log_level)

    try:
        charged = parse_amount(amount_charged, "AMOUNT_CHARGED")
        given = parse_amount(amount_given, "AMOUNT_GIVEN")
    except ValueError as e:
        raise typer.BadParameter(str(e))

    table = None
    if denominations is not None:
        try:
            table = DenominationTable.from_string(denominations)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--denominations")

    calculator = ChangeCalculator(table)
    logger.info(f"Charging {charged} from {given} with units {list(calculator.table.units)}")

    # try_charge превращает в ChargeFailure *только* ошибку валидации
    outcome = calculator.try_charge(charged, given)
    typer.echo(render_outcome(outcome, as_json=as_json))


if __name__ == "__main__":
    app()
