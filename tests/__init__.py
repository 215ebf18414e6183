"""
Test suite for boxstats

Contains:
- tests/unit/          : Unit tests for individual modules
"""
