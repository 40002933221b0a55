"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the slippage guard
and is independent of the matching engine and order storage.
"""
