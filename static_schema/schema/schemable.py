"""
Capability interface for schema interpreters.

The combinator vocabulary (literals, primitives, type, array, union, ...) can be
implemented by several interchangeable strategies that share the vocabulary but
not the representation. ``Schemable`` describes the vocabulary structurally;
``s`` is the textual-signature strategy backed by the combinators in this
package.

A schema written once against the interface can be interpreted by any strategy:

    ```python
    from static_schema.schema.schemable import interpret, make_schema, s

    Person = make_schema(lambda S: S.type({"name": S.string, "age": S.number}))

    interpret(Person, s)()  # '{ name: string; age: number; }'
    ```
"""

import logging
import weakref
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Protocol, Sequence, Tuple, TypeVar

from static_schema.schema import combinators
from static_schema.schema.combinators import Literal
from static_schema.schema.naming import RefNamer
from static_schema.schema.types import Static

logger = logging.getLogger(__name__)

S = TypeVar("S")

URI = "Static"


class Schemable(Protocol):
    """Combinator vocabulary every interpreter provides."""

    URI: str

    def literals(self, values: Sequence[Literal]) -> Any: ...

    def literals_or(self, values: Sequence[Literal], fallback: Any) -> Any: ...

    @property
    def string(self) -> Any: ...

    @property
    def number(self) -> Any: ...

    @property
    def boolean(self) -> Any: ...

    @property
    def unknown_array(self) -> Any: ...

    @property
    def unknown_record(self) -> Any: ...

    def type(self, fields: Mapping[str, Any]) -> Any: ...

    def partial(self, fields: Mapping[str, Any]) -> Any: ...

    def record(self, codomain: Any) -> Any: ...

    def array(self, item: Any) -> Any: ...

    def tuple(self, members: Sequence[Any]) -> Any: ...

    def intersection(self, members: Sequence[Any]) -> Any: ...

    def sum(self, tag: str) -> Callable[[Mapping[Any, Any]], Any]: ...

    def lazy(self, producer: Callable[[], Any]) -> Any: ...


class WithUnion(Protocol):
    """Interpreters that also support undiscriminated unions."""

    def union(self, members: Sequence[Any]) -> Any: ...


@dataclass(frozen=True)
class StaticSchemable:
    """
    Textual-signature interpreter: every field is the matching combinator.

    Attributes:
        URI: Identifying discriminator of this interpreter ("Static")
    """

    URI: str
    literals: Callable[[Sequence[Literal]], Static]
    literals_or: Callable[[Sequence[Literal], Static], Static]
    string: Static
    number: Static
    boolean: Static
    unknown_array: Static
    unknown_record: Static
    type: Callable[[Mapping[str, Static]], Static]
    partial: Callable[[Mapping[str, Static]], Static]
    record: Callable[[Static], Static]
    array: Callable[[Static], Static]
    tuple: Callable[[Sequence[Static]], Static]
    intersection: Callable[[Sequence[Static]], Static]
    sum: Callable[[str], Callable[[Mapping[Any, Static]], Static]]
    lazy: Callable[..., Static]
    union: Callable[[Sequence[Static]], Static]


s = StaticSchemable(
    URI=URI,
    literals=combinators.literals,
    literals_or=combinators.literals_or,
    string=combinators.string,
    number=combinators.number,
    boolean=combinators.boolean,
    unknown_array=combinators.unknown_array,
    unknown_record=combinators.unknown_record,
    type=combinators.type_,
    partial=combinators.partial,
    record=combinators.record,
    array=combinators.array,
    tuple=combinators.tuple_,
    intersection=combinators.intersection,
    sum=combinators.sum_,
    lazy=combinators.lazy,
    union=combinators.union,
)


def with_namer(namer: RefNamer) -> StaticSchemable:
    """
    Return a copy of ``s`` whose ``lazy`` always mints names from ``namer``.

    Args:
        namer: Namer bound to every lazy node built through the copy
    """
    return replace(s, lazy=lambda producer: combinators.lazy(producer, namer=namer))


# ---------------------------------------------------------------------------
# interpreter registry
# ---------------------------------------------------------------------------

_registry: Dict[str, Any] = {}


def register_schemable(schemable: Any) -> None:
    """
    Register an interpreter under its URI.

    Raises:
        ValueError: If the URI is missing or already registered to another
            interpreter
    """
    uri = getattr(schemable, "URI", None)
    if not uri:
        raise ValueError("Interpreter must define a non-empty URI")

    existing = _registry.get(uri)
    if existing is not None and existing is not schemable:
        raise ValueError(f"Interpreter URI '{uri}' already registered to {existing!r}")

    _registry[uri] = schemable
    logger.debug(f"Registered interpreter {uri}")


def get_schemable(uri: str) -> Any:
    """
    Look up a registered interpreter.

    Raises:
        KeyError: If no interpreter is registered under ``uri``
    """
    try:
        return _registry[uri]
    except KeyError:
        available = ", ".join(sorted(_registry)) or "none"
        raise KeyError(f"No interpreter registered for '{uri}' (available: {available})")


register_schemable(s)


# ---------------------------------------------------------------------------
# interpreter-independent schemas
# ---------------------------------------------------------------------------


class Schema(Generic[S]):
    """
    A schema definition written against the capability interface.

    The definition runs at most once per interpreter; later interpretations
    with the same interpreter return the same result, so recursive definitions
    built with ``lazy`` keep a single reference identity.

    Interpreters are held weakly: an entry is dropped once its interpreter is
    garbage collected, so short-lived interpreters such as ``with_namer()``
    copies do not accumulate. A result that itself refers to its interpreter
    keeps the interpreter alive for as long as the Schema lives.
    """

    def __init__(self, definition: Callable[[Any], S]):
        self._definition = definition
        self._cache: Dict[int, Tuple[Callable[[], Any], S]] = {}

    def __call__(self, schemable: Any) -> S:
        key = id(schemable)
        cached = self._cache.get(key)
        if cached is None or cached[0]() is not schemable:
            cached = (self._reference(schemable, key), self._definition(schemable))
            self._cache[key] = cached
        return cached[1]

    @property
    def cache_size(self) -> int:
        """Number of interpreters with a cached result."""
        return len(self._cache)

    def _reference(self, schemable: Any, key: int) -> Callable[[], Any]:
        cache = self._cache
        try:
            return weakref.ref(schemable, lambda _: cache.pop(key, None))
        except TypeError:
            # Not weak-referenceable (e.g. __slots__ without __weakref__)
            return lambda: schemable


def make_schema(definition: Callable[[Any], S]) -> Schema:
    """Wrap a definition (interpreter -> representation) into a Schema."""
    return Schema(definition)


def interpret(schema: Callable[[Any], S], schemable: Optional[Any] = None) -> S:
    """
    Interpret a schema with an interpreter (default: ``s``).

    Args:
        schema: Schema or plain definition function
        schemable: Interpreter instance, or the URI of a registered one
    """
    if schemable is None:
        schemable = s
    elif isinstance(schemable, str):
        schemable = get_schemable(schemable)
    return schema(schemable)
