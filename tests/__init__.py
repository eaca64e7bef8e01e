"""
Test suite for bitnum

Contains:
- tests/unit/          : Unit tests for the value type, arithmetic, contracts and demo
"""
