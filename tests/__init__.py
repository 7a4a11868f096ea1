"""
Test suite for qlinalg

Contains:
- tests/unit/          : Unit tests for individual modules and algebraic properties
"""
