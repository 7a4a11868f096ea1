"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks of qlinalg: float
comparison helpers, the complex scalar/vector/matrix value types and the
JSON payload contracts used to exchange them.
"""
