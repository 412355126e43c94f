"""
Test suite for fixed_decimal

Contains:
- tests/unit/          : Unit tests for individual modules and end-to-end scenarios
"""
