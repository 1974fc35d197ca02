"""
Test suite for numeral-systems

Contains:
- tests/unit/          : Unit tests for individual modules
"""
