"""
Core domain models, numerical primitives, and contracts.

This module contains the foundational building blocks that are independent
of the settlement strategies and the benchmark harness.
"""
