"""
Utility functions and helpers.

This module contains shared utilities used across static_schema components.

Components:
    - collections: Non-empty sequence checks and the structural merge helper
    - logging: Logging configuration with a Rich console handler

Example:
    ```python
    from static_schema.utils import intersect, setup_logging

    setup_logging(level="DEBUG")
    intersect({"a": 1}, {"b": 2})  # {'a': 1, 'b': 2}
    ```
"""

from static_schema.utils.collections import (
    eq_strict,
    has_own_property,
    intersect,
    is_non_empty,
    map_non_empty,
)
from static_schema.utils.logging import setup_logging

__all__ = [
    "eq_strict",
    "has_own_property",
    "intersect",
    "is_non_empty",
    "map_non_empty",
    "setup_logging",
]
