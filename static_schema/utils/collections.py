"""
Small collection helpers shared by the combinators and the schema parser.
"""

from typing import Any, Callable, Mapping, Sequence, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def is_non_empty(items: Sequence[Any]) -> bool:
    """Return True if the sequence has at least one element."""
    return len(items) > 0


def has_own_property(obj: Any, key: str) -> bool:
    """
    Check whether ``key`` is defined directly on ``obj``.

    Mappings are checked by key, other objects by their instance ``__dict__``
    (class attributes and inherited members do not count).
    """
    if isinstance(obj, Mapping):
        return key in obj
    return key in getattr(obj, "__dict__", {})


def eq_strict(a: Any, b: Any) -> bool:
    """Strict equality: same type and equal value (True != 1 here)."""
    return type(a) is type(b) and a == b


def intersect(a: Any, b: Any) -> Any:
    """
    Merge two values, preferring the second.

    When both values are present and at least one of them is a mapping, the
    result is a new dict with the keys of ``a`` overridden by those of ``b``.
    Otherwise ``b`` is returned unchanged.

    Example:
        ```python
        intersect({"a": 1}, {"b": 2})   # {'a': 1, 'b': 2}
        intersect(1, 2)                 # 2
        ```
    """
    if a is not None and b is not None:
        if isinstance(a, Mapping) or isinstance(b, Mapping):
            merged = dict(a) if isinstance(a, Mapping) else {}
            if isinstance(b, Mapping):
                merged.update(b)
            return merged
    return b


def map_non_empty(items: Sequence[T], fn: Callable[[T], U]) -> Tuple[U, ...]:
    """
    Map over a non-empty sequence, keeping it non-empty.

    Raises:
        ValueError: If ``items`` is empty
    """
    if not is_non_empty(items):
        raise ValueError("Expected a non-empty sequence")
    return tuple(fn(item) for item in items)
