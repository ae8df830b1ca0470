"""
Contract Validation Module

JSON Schema контракт для JSON-вывода калькулятора сдачи.
"""

from .validators import (
    OUTCOME_SCHEMA_NAME,
    SCHEMA_DIR,
    load_schema,
    outcome_errors,
    validate_charge_outcome,
)

__all__ = [
    "SCHEMA_DIR",
    "OUTCOME_SCHEMA_NAME",
    "load_schema",
    "validate_charge_outcome",
    "outcome_errors",
]
