"""
static-schema: Render schema definitions as type signatures

static-schema is a small combinator algebra for describing a data shape once
(primitives, records, arrays, tuples, unions, intersections and recursive
structures) and rendering it, on demand, as a TypeScript-style type signature.

Key Features:
    - Deferred nodes: composing combinators never evaluates anything
    - Recursive schemas via ``lazy`` with bounded, terminating output
    - Injectable reference naming ($Ref1, $Ref2, ...) with a declaration table
    - One capability record ``s`` for interpreter-independent schemas
    - JSON Schema and Pydantic model front end, plus a Typer/Rich CLI

Quick Start:
    ```python
    from static_schema import array, lazy, number, string, type_

    Tree = lazy(lambda: type_({"value": number, "children": array(Tree)}))

    print(Tree())   # { value: number; children: Array<$Ref1>; }
    print(Tree())   # $Ref1
    ```

Architecture:
    1. Static nodes: zero-argument producers of signature strings
    2. Combinators: build nodes by interpolating their children's renders
    3. lazy: one-shot reference cell per recursive node, names from a RefNamer
    4. Parser: JSON Schema / Pydantic -> nodes
    5. CLI: render and check schema files
"""

__version__ = "0.1.0"

from static_schema.schema import (  # noqa: F401
    RefNamer,
    Static,
    array,
    boolean,
    interpret,
    intersection,
    lazy,
    literals,
    literals_or,
    make_schema,
    number,
    parse_schema,
    partial,
    record,
    render,
    s,
    string,
    sum_,
    tuple_,
    type_,
    union,
    unknown_array,
    unknown_record,
    use_namer,
)

__all__ = [
    "RefNamer",
    "Static",
    "array",
    "boolean",
    "interpret",
    "intersection",
    "lazy",
    "literals",
    "literals_or",
    "make_schema",
    "number",
    "parse_schema",
    "partial",
    "record",
    "render",
    "s",
    "string",
    "sum_",
    "tuple_",
    "type_",
    "union",
    "unknown_array",
    "unknown_record",
    "use_namer",
]
