"""
Test suite for debt-settlement

Contains:
- tests/unit/          : Unit tests for individual modules and engine
"""
