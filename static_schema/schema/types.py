"""
Signature node definition.

A signature node is a deferred computation: a zero-argument producer that yields
the textual signature of a data shape when (and only when) it is rendered.
Combinators build new nodes by wrapping the producers of existing ones, so a
whole tree of nodes can be composed without evaluating anything.

Type Parameters:
    Static[A] is parameterized by the logical data shape ``A`` it describes.
    The parameter is bookkeeping for type checkers only; it has no runtime
    representation.

Example:
    ```python
    from static_schema.schema.types import make

    node = make(lambda: "string")
    node()          # 'string'
    node.render()   # 'string'
    ```
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

A = TypeVar("A")

# Rendered representation of a node
Model = str


@dataclass(frozen=True)
class Static(Generic[A]):
    """
    A schema fragment that renders itself as a textual signature on demand.

    Attributes:
        producer: Zero-argument callable returning the signature string
    """

    producer: Callable[[], Model]

    def __call__(self) -> Model:
        return self.producer()

    def render(self) -> Model:
        """Render this node to its signature string."""
        return self.producer()


def make(producer: Callable[[], Model]) -> Static:
    """
    Wrap a zero-argument producer into a Static node.

    Args:
        producer: Callable returning the signature string

    Returns:
        Static: Node deferring to ``producer`` at render time

    Raises:
        TypeError: If producer is not callable
    """
    if not callable(producer):
        raise TypeError(f"Static producer must be callable, got: {type(producer).__name__}")
    return Static(producer)
