"""
Test suite for civiltime

Contains:
- tests/unit/          : Unit tests for value types, math primitives and contracts
"""
