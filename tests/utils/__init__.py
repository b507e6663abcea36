"""
Test Utilities
==============

Mocks and helpers shared across the test suite.
"""
