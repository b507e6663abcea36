"""
Test Suite
==========

Test suite matching the noderaster/ package structure.

Test Categories:
- unit: Unit tests for individual components
"""
