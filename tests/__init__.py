"""
Test suite for hebrides

Contains:
- tests/unit/          : Unit tests for individual modules
"""
