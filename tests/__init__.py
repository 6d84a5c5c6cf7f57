"""
Test suite for joint-account

Contains:
- tests/unit/          : Unit tests for individual modules
"""
