"""
Test suite for change-calculator

Contains:
- tests/unit/          : Unit tests for domain models, calculator, contracts and CLI
"""
