"""
Test suite for boolswitch

Contains:
- tests/unit/          : Unit tests for individual modules
"""
