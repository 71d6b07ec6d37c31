"""
Test suite for the heritage distribution engine

Contains:
- tests/unit/          : Unit tests for individual modules and reference scenarios
"""
