"""
Combinator algebra for textual signatures.

Primitives are constant nodes; combinators build new nodes from existing ones by
interpolating the renders of their children. Construction never renders a
child: every producer runs only when the resulting node is itself rendered, and
children render in sequence order.

Render Shapes:
    - literals:      ("a" | 1 | true)
    - type_:         { a: string; b: number; }
    - partial:       Partial<{ a: string; }>
    - record:        Record<string, number>
    - array:         Array<string>
    - tuple_:        [string, number]
    - intersection:  ({ a: string; } & { b: number; })
    - union / sum_:  (string | boolean)
    - lazy:          full expansion on first render, $RefN afterwards

Usage:
    ```python
    from static_schema.schema.combinators import array, lazy, number, type_

    Tree = lazy(lambda: type_({"value": number, "children": array(Tree)}))

    Tree()  # '{ value: number; children: Array<$Ref1>; }'
    Tree()  # '$Ref1'
    ```

Names ``type_``, ``tuple_`` and ``sum_`` carry a trailing underscore to avoid
shadowing builtins; the capability record in ``schemable`` exposes them as
``type``, ``tuple`` and ``sum``.
"""

import json
import logging
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from static_schema.schema.naming import RefCell, RefNamer, current_namer
from static_schema.schema.types import Model, Static, make
from static_schema.utils.collections import is_non_empty

logger = logging.getLogger(__name__)

Literal = Union[str, int, float, bool]

MIN_TUPLE_ARITY = 1
MAX_TUPLE_ARITY = 5
MIN_INTERSECTION_ARITY = 2
MAX_INTERSECTION_ARITY = 5


def _check_nodes(nodes: Sequence[Static], combinator: str) -> None:
    for i, node in enumerate(nodes):
        if not callable(node):
            raise TypeError(f"{combinator}: member {i} is not a signature node: {node!r}")


def _check_fields(fields: Mapping[str, Static], combinator: str) -> None:
    for key, node in fields.items():
        if not isinstance(key, str):
            raise TypeError(f"{combinator}: field names must be strings, got: {key!r}")
        if not callable(node):
            raise TypeError(f"{combinator}: field '{key}' is not a signature node: {node!r}")


def _check_arity(nodes: Sequence[Static], combinator: str, low: int, high: int) -> None:
    if not low <= len(nodes) <= high:
        raise ValueError(
            f"{combinator} supports {low} to {high} members, got {len(nodes)}"
        )


def _literal(value: Literal) -> str:
    if not isinstance(value, (str, int, float, bool)):
        raise TypeError(f"Unsupported literal value: {value!r}")
    return json.dumps(value, ensure_ascii=False)


# ---------------------------------------------------------------------------
# constructors
# ---------------------------------------------------------------------------


def literals(values: Sequence[Literal]) -> Static:
    """
    Build a node rendering a set of literal values.

    Args:
        values: Non-empty sequence of strings, numbers or booleans

    Returns:
        Static: Node rendering ``(v1 | v2 | ...)`` with JSON-encoded values

    Raises:
        ValueError: If ``values`` is empty
        TypeError: If a value is not a string, number or boolean

    Example:
        ```python
        literals(["a", 1, True])()  # '("a" | 1 | true)'
        ```
    """
    if not is_non_empty(values):
        raise ValueError("literals() requires at least one value")

    encoded = [_literal(v) for v in values]
    return make(lambda: f"({' | '.join(encoded)})")


def literals_or(values: Sequence[Literal], fallback: Static) -> Static:
    """
    Build a node rendering a set of literals unioned with a fallback node.

    Example:
        ```python
        literals_or(["auto"], number)()  # '(("auto") | number)'
        ```
    """
    return union([literals(values), fallback])


# ---------------------------------------------------------------------------
# primitives
# ---------------------------------------------------------------------------

string: Static = make(lambda: "string")

number: Static = make(lambda: "number")

boolean: Static = make(lambda: "boolean")

unknown_array: Static = make(lambda: "Array<unknown>")

unknown_record: Static = make(lambda: "Record<string, unknown>")


# ---------------------------------------------------------------------------
# combinators
# ---------------------------------------------------------------------------


def type_(fields: Mapping[str, Static]) -> Static:
    """
    Build a record node with one entry per field.

    Args:
        fields: Mapping of field name to node, rendered in iteration order

    Returns:
        Static: Node rendering ``{ f1: R1; f2: R2; }``
    """
    _check_fields(fields, "type")
    items = list(fields.items())

    def render() -> Model:
        body = " ".join(f"{key}: {node()};" for key, node in items)
        return f"{{ {body} }}"

    return make(render)


def partial(fields: Mapping[str, Static]) -> Static:
    """Build a record node whose fields are all optional: ``Partial<{ ... }>``."""
    inner = type_(fields)
    return make(lambda: f"Partial<{inner()}>")


def record(codomain: Static) -> Static:
    """Build a string-keyed map node: ``Record<string, R>``."""
    _check_nodes([codomain], "record")
    return make(lambda: f"Record<string, {codomain()}>")


def array(item: Static) -> Static:
    """Build an array node: ``Array<R>``."""
    _check_nodes([item], "array")
    return make(lambda: f"Array<{item()}>")


def tuple_(members: Sequence[Static]) -> Static:
    """
    Build a fixed-size tuple node: ``[R1, R2, ...]``.

    Raises:
        ValueError: If the tuple has fewer than 1 or more than 5 members
    """
    members = list(members)
    _check_arity(members, "tuple", MIN_TUPLE_ARITY, MAX_TUPLE_ARITY)
    _check_nodes(members, "tuple")
    return make(lambda: f"[{', '.join(m() for m in members)}]")


def intersection(members: Sequence[Static]) -> Static:
    """
    Build an intersection node: ``(R1 & R2 & ...)``.

    Raises:
        ValueError: If the intersection has fewer than 2 or more than 5 members
    """
    members = list(members)
    _check_arity(members, "intersection", MIN_INTERSECTION_ARITY, MAX_INTERSECTION_ARITY)
    _check_nodes(members, "intersection")
    return make(lambda: f"({' & '.join(m() for m in members)})")


def sum_(tag: str) -> Callable[[Mapping[Any, Static]], Static]:
    """
    Build a discriminated union, in two stages.

    The first stage fixes the discriminant field name; the returned function
    takes a mapping of tag value to member node. Members are expected to render
    a shape containing the discriminant, which is not checked here.

    Args:
        tag: Name of the discriminant field

    Returns:
        Function building ``(R1 | R2 | ...)`` over the mapping's values

    Example:
        ```python
        Shape = sum_("kind")({
            "circle": type_({"kind": literals(["circle"]), "radius": number}),
            "square": type_({"kind": literals(["square"]), "side": number}),
        })
        ```
    """

    def build(members: Mapping[Any, Static]) -> Static:
        if not members:
            raise ValueError(f"sum('{tag}') requires at least one member")
        nodes = list(members.values())
        _check_nodes(nodes, f"sum('{tag}')")
        return make(lambda: f"({' | '.join(node() for node in nodes)})")

    return build


def union(members: Sequence[Static]) -> Static:
    """
    Build an undiscriminated union node: ``(R1 | R2 | ...)``.

    Raises:
        ValueError: If ``members`` is empty
    """
    members = list(members)
    if not is_non_empty(members):
        raise ValueError("union() requires at least one member")
    _check_nodes(members, "union")
    return make(lambda: f"({' | '.join(m() for m in members)})")


def lazy(producer: Callable[[], Static], namer: Optional[RefNamer] = None) -> Static:
    """
    Build a recursive-reference node.

    On its first render the node claims a reference name (before expanding the
    body, so self-references met during the expansion render as that name),
    then renders the node returned by ``producer`` and returns the full
    expansion. Every later render returns the name alone.

    Args:
        producer: Zero-argument callable returning the node to expand; it may
            refer to the node being built
        namer: Namer to mint the name from (default: the namer active at first
            render, see ``naming.use_namer``)

    Returns:
        Static: The recursive-reference node

    Raises:
        TypeError: If producer is not callable

    Note:
        There is no depth limit. A producer that builds a new lazy node on
        every call never hits a cached name and does not terminate.
    """
    if not callable(producer):
        raise TypeError(f"lazy() expects a callable, got: {type(producer).__name__}")

    cell = RefCell()

    def render() -> Model:
        active = namer if namer is not None else current_namer()
        name, first = cell.claim(active)
        if not first:
            return name

        logger.debug(f"Expanding recursive node {name}")
        expansion = producer()()
        active.declare(name, expansion)
        return expansion

    return make(render)
