"""
Test suite for complexfield

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
