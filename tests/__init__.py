"""
Test suite for the color identity engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
