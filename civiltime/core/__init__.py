"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational value types for human-readable time
that are independent of any calendar system.
"""
