"""
Test suite for coinchange

Contains:
- tests/unit/          : Unit tests for individual modules
"""
