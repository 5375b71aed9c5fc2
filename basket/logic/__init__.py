"""Core business logic layer.

Subpackages:
- pricing: money helpers and unit-price normalization
- shopping: shopping list cost aggregation

Everything here is pure: no I/O, no shared state, safe to call from any request thread.
"""
__all__ = ["pricing", "shopping"]
