"""
Test suite for the sequence/combinatorics core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
