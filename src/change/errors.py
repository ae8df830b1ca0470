"""
Ошибки калькулятора сдачи.

ChargeValidationError: единственная распознаваемая ошибка ядра:
выданной суммы недостаточно для оплаты. Вызывающий код форматирует её
как сообщение пользователю; любые другие исключения пробрасываются.
"""


class ChargeValidationError(ValueError):
    """
    Недостаточная выданная сумма: amount_charged > amount_given.

    Attributes:
        amount_charged: Сумма к оплате
        amount_given: Выданная сумма
    """

    def __init__(self, amount_charged: int, amount_given: int):
        self.amount_charged = amount_charged
        self.amount_given = amount_given
        super().__init__(
            f"Given amount {amount_given} is too little to charge {amount_charged}."
        )
