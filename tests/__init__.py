"""
Test suite for FuzzyCal

Contains:
- tests/unit/          : Unit tests for individual modules
"""
