"""
Schema combinators and JSON Schema front end.

This module exposes the combinator algebra that describes a data shape once and
renders it as a TypeScript-style signature on demand, plus a parser that turns
existing JSON Schema documents (or Pydantic models) into the same nodes.

Components:
    - types: The Static signature node (a deferred string producer)
    - naming: Reference names for recursive nodes ($Ref1, $Ref2, ...)
    - combinators: Primitives and structural combinators, including lazy
    - schemable: The capability record ``s`` and interpreter-independent schemas
    - parser: JSON Schema dict -> Static node
    - pydantic_adapter: Convert Pydantic models to JSON Schema

Example:
    ```python
    from static_schema.schema import array, lazy, number, render, type_

    Tree = lazy(lambda: type_({"value": number, "children": array(Tree)}))

    render(Tree)  # '{ value: number; children: Array<$Ref1>; }'
    render(Tree)  # '$Ref1'
    ```
"""

from typing import Optional

from static_schema.schema.combinators import (
    array,
    boolean,
    intersection,
    lazy,
    literals,
    literals_or,
    number,
    partial,
    record,
    string,
    sum_,
    tuple_,
    type_,
    union,
    unknown_array,
    unknown_record,
)
from static_schema.schema.naming import RefNamer, current_namer, default_namer, use_namer
from static_schema.schema.parser import normalize_schema, parse_schema, validate_schema
from static_schema.schema.pydantic_adapter import is_pydantic_model, pydantic_to_schema
from static_schema.schema.schemable import (
    URI,
    Schema,
    Schemable,
    StaticSchemable,
    WithUnion,
    get_schemable,
    interpret,
    make_schema,
    register_schemable,
    s,
    with_namer,
)
from static_schema.schema.types import Model, Static, make


def render(node: Static, namer: Optional[RefNamer] = None) -> Model:
    """
    Render a node to its signature string.

    Args:
        node: Node to render
        namer: Namer to activate while rendering (default: the active namer)

    Returns:
        str: The signature
    """
    if namer is None:
        return node()
    with use_namer(namer):
        return node()


__all__ = [
    "Model",
    "Static",
    "make",
    "render",
    "RefNamer",
    "current_namer",
    "default_namer",
    "use_namer",
    "literals",
    "literals_or",
    "string",
    "number",
    "boolean",
    "unknown_array",
    "unknown_record",
    "type_",
    "partial",
    "record",
    "array",
    "tuple_",
    "intersection",
    "sum_",
    "lazy",
    "union",
    "URI",
    "Schema",
    "Schemable",
    "StaticSchemable",
    "WithUnion",
    "get_schemable",
    "interpret",
    "make_schema",
    "register_schemable",
    "s",
    "with_namer",
    "parse_schema",
    "normalize_schema",
    "validate_schema",
    "pydantic_to_schema",
    "is_pydantic_model",
]
