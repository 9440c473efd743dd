"""
Reference naming for recursive signatures.

Recursive (``lazy``) nodes collapse to a short reference name after their first
render. This module owns the state behind that mechanism:

    - RefNamer: mints unique names ($Ref1, $Ref2, ...) from a monotonically
      increasing counter and keeps a declaration table of first expansions
    - RefCell: the write-once slot owned by a single lazy node

A process-wide default namer is used unless another one is activated with
``use_namer()`` or passed explicitly to ``lazy()``. Activation is tracked with a
context variable, so concurrent renders in different threads or tasks can use
independent namers.

Usage:
    ```python
    from static_schema.schema.naming import RefNamer, use_namer

    namer = RefNamer()
    with use_namer(namer):
        signature = Tree()

    namer.declarations  # {'$Ref1': '{ value: number; children: Array<$Ref1>; }'}
    ```
"""

import logging
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Dict, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "$Ref"


class RefNamer:
    """
    Thread-safe source of unique reference names.

    The counter is incremented once per minted name and is never reset or
    decremented, so names are never reused by the same namer.

    Attributes:
        prefix: Prefix of every minted name
        count: Number of names minted so far (including ``start``)
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX, start: int = 0):
        """
        Initialize the namer.

        Args:
            prefix: Name prefix (default: "$Ref")
            start: Initial counter value; the first name uses ``start + 1``
        """
        if start < 0:
            raise ValueError(f"Counter start must be non-negative, got: {start}")

        self.prefix = prefix
        self._count = start
        self._declarations: Dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        return self._count

    @property
    def declarations(self) -> Dict[str, str]:
        """Copy of the declaration table (name -> first full expansion)."""
        with self._lock:
            return dict(self._declarations)

    def next_name(self) -> str:
        """
        Mint a fresh reference name.

        Returns:
            str: Name such as "$Ref1"
        """
        with self._lock:
            self._count += 1
            name = f"{self.prefix}{self._count}"

        logger.debug(f"Minted reference name {name}")
        return name

    def declare(self, name: str, expansion: str) -> None:
        """Record the full expansion a reference name stands for."""
        with self._lock:
            self._declarations.setdefault(name, expansion)

    def __repr__(self) -> str:
        return f"RefNamer(prefix={self.prefix!r}, count={self._count})"


_default_namer = RefNamer()
_active_namer: ContextVar[Optional[RefNamer]] = ContextVar("static_schema_namer", default=None)


def default_namer() -> RefNamer:
    """Return the process-wide default namer."""
    return _default_namer


def current_namer() -> RefNamer:
    """Return the namer active in the current context, or the default one."""
    namer = _active_namer.get()
    return namer if namer is not None else _default_namer


@contextmanager
def use_namer(namer: RefNamer) -> Iterator[RefNamer]:
    """
    Activate a namer for the duration of a block.

    Lazy nodes rendered for the first time inside the block mint their names
    from ``namer`` (unless they were constructed with an explicit namer).

    Args:
        namer: Namer to activate

    Yields:
        RefNamer: The activated namer
    """
    token = _active_namer.set(namer)
    try:
        yield namer
    finally:
        _active_namer.reset(token)


class RefCell:
    """
    Write-once slot holding the reference name of one lazy node.

    The cell starts unresolved and is resolved exactly once, by the first call
    to ``claim()``. Every later claim returns the same name.
    """

    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def resolved(self) -> bool:
        return self._name is not None

    def claim(self, namer: RefNamer) -> Tuple[str, bool]:
        """
        Resolve the cell if needed and return its name.

        Args:
            namer: Namer used to mint the name on first claim

        Returns:
            Tuple of (name, first) where ``first`` is True only for the claim
            that resolved the cell
        """
        with self._lock:
            if self._name is not None:
                return self._name, False
            self._name = namer.next_name()
            return self._name, True
