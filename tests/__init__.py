"""
Test suite for the swap slippage guard

Contains:
- tests/unit/          : Unit tests for individual modules
"""
