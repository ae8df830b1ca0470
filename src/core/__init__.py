"""
Core domain models and invariants.

This module contains the foundational building blocks (denominations,
amounts, change breakdowns) that are independent of any input or output
layer.
"""
