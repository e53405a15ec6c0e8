"""
Test suite for lazyfp

Contains:
- tests/unit/          : Unit tests for individual modules
"""
