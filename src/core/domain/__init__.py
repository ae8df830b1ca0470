"""
Domain models and value objects.

Contains fundamental domain entities like DenominationTable, Amount, ChargeResult.
"""

from src.core.domain.amounts import Amount, validate_amount
from src.core.domain.charge_result import ChargeResult
from src.core.domain.denominations import (
    DEFAULT_CURRENCY_UNITS,
    DEFAULT_DENOMINATION_TABLE,
    REQUIRED_SMALLEST_UNIT,
    DenominationTable,
)

__all__ = [
    # Denominations module
    "DEFAULT_CURRENCY_UNITS",
    "DEFAULT_DENOMINATION_TABLE",
    "REQUIRED_SMALLEST_UNIT",
    "DenominationTable",
    # Amounts module
    "Amount",
    "validate_amount",
    # Charge result model
    "ChargeResult",
]
