"""
Test suite for the N(m.k) number format validator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
