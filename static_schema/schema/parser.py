"""
JSON Schema parser - converts JSON Schema dicts to signature nodes.

This module is the main entry point for rendering existing schema documents. It
maps JSON Schema keywords onto the combinator algebra:

    - string / number / integer / boolean / null -> primitive nodes
    - object with properties -> type_ (required) and partial (optional)
    - object with additionalProperties schema -> record
    - array with items -> array, with prefixItems (or list items) -> tuple_
    - enum / const -> literals
    - anyOf / oneOf -> union, oneOf + discriminator -> sum_
    - allOf -> intersection
    - $ref to a local definition -> lazy (one node per target per parse)

Usage:
    ```python
    from static_schema.schema import parse_schema

    schema = {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "tags": {"type": "array", "items": {"type": "string"}}
        },
        "required": ["name", "tags"]
    }

    node = parse_schema(schema)
    node()  # '{ name: string; tags: Array<string>; }'
    ```

Note:
    Reference targets are parsed when their lazy node first renders, so an
    invalid definition reached only through ``$ref`` raises at render time.
    Run ``validate_schema()`` first to catch these problems up front.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from static_schema.schema.combinators import (
    array,
    boolean,
    intersection,
    lazy,
    literals,
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
from static_schema.schema.naming import RefNamer
from static_schema.schema.types import Static, make

logger = logging.getLogger(__name__)

null: Static = make(lambda: "null")
unknown: Static = make(lambda: "unknown")
never: Static = make(lambda: "never")

VALID_TYPES = ["object", "array", "string", "integer", "number", "boolean", "null"]
UNSUPPORTED_KEYWORDS = ["not", "if", "then", "else"]


class _ParseContext:
    """State of one parse: the root document and its reference nodes."""

    def __init__(self, root: Any, namer: Optional[RefNamer]):
        self.root = root
        self.namer = namer
        self.refs: Dict[str, Static] = {}


def parse_schema(
    schema: Union[Dict[str, Any], bool, type],
    namer: Optional[RefNamer] = None
) -> Static:
    """
    Parse a JSON Schema or Pydantic model into a Static node.

    Args:
        schema: JSON Schema dict (or boolean schema) or Pydantic model class
        namer: Namer for the lazy nodes created for ``$ref`` targets
            (default: the namer active at render time)

    Returns:
        Static: Node rendering the schema's signature

    Raises:
        ValueError: If the schema is invalid or unsupported

    Example:
        ```python
        from pydantic import BaseModel

        class User(BaseModel):
            name: str
            age: int

        parse_schema(User)()  # '{ name: string; age: number; }'
        ```
    """
    if isinstance(schema, type):
        from static_schema.schema.pydantic_adapter import pydantic_to_schema

        schema = pydantic_to_schema(schema)

    context = _ParseContext(schema, namer)
    return _parse_schema_dict(schema, context)


def _parse_schema_dict(schema: Any, context: _ParseContext) -> Static:
    """
    Internal method to parse one (sub)schema.

    Raises:
        ValueError: If the schema type is unsupported
    """
    # Boolean schemas: true accepts anything, false nothing
    if schema is True:
        return unknown
    if schema is False:
        return never

    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be an object or boolean, got: {type(schema).__name__}")

    if "$ref" in schema:
        return _parse_ref(schema["$ref"], context)

    if "anyOf" in schema:
        return _parse_union(schema["anyOf"], context)
    if "oneOf" in schema:
        discriminator = schema.get("discriminator")
        if isinstance(discriminator, dict) and "propertyName" in discriminator:
            return _parse_sum(schema["oneOf"], discriminator, context)
        return _parse_union(schema["oneOf"], context)
    if "allOf" in schema:
        return _parse_intersection(schema["allOf"], context)

    if "const" in schema:
        return _parse_enum([schema["const"]])
    if "enum" in schema:
        return _parse_enum(schema["enum"])

    schema_type = schema.get("type")

    if schema_type is None:
        # No type specified - try to infer from keywords
        if "properties" in schema or "additionalProperties" in schema:
            schema_type = "object"
        elif "items" in schema or "prefixItems" in schema:
            schema_type = "array"
        else:
            return unknown

    # Handle array of types (e.g., ["string", "null"])
    if isinstance(schema_type, list):
        if not schema_type:
            raise ValueError("Type array must not be empty")
        rest = {k: v for k, v in schema.items() if k != "type"}
        return union([_parse_schema_dict({"type": t, **rest}, context) for t in schema_type])

    if schema_type == "object":
        return _parse_object(schema, context)
    elif schema_type == "array":
        return _parse_array(schema, context)
    elif schema_type == "string":
        return string
    elif schema_type in ("integer", "number"):
        return number
    elif schema_type == "boolean":
        return boolean
    elif schema_type == "null":
        return null
    else:
        raise ValueError(f"Unsupported schema type: {schema_type}")


def _field_name(name: str) -> str:
    # Names that are not identifiers are rendered quoted
    return name if name.isidentifier() else json.dumps(name, ensure_ascii=False)


def _parse_object(schema: Dict[str, Any], context: _ParseContext) -> Static:
    """
    Parse an object schema.

    Required properties become a ``type_`` node and optional ones a ``partial``
    node; when both exist the result is their intersection. A schema-valued
    ``additionalProperties`` adds a ``record`` node.
    """
    properties = schema.get("properties")
    additional = schema.get("additionalProperties")
    additional_node = _parse_schema_dict(additional, context) if isinstance(additional, dict) else None

    if properties is None:
        if additional_node is not None:
            return record(additional_node)
        return unknown_record

    required = set(schema.get("required", []))
    required_fields: Dict[str, Static] = {}
    optional_fields: Dict[str, Static] = {}
    for prop_name, prop_schema in properties.items():
        node = _parse_schema_dict(prop_schema, context)
        if prop_name in required:
            required_fields[_field_name(prop_name)] = node
        else:
            optional_fields[_field_name(prop_name)] = node

    parts: List[Static] = []
    if required_fields or not optional_fields:
        parts.append(type_(required_fields))
    if optional_fields:
        parts.append(partial(optional_fields))
    if additional_node is not None:
        parts.append(record(additional_node))

    return parts[0] if len(parts) == 1 else intersection(parts)


def _parse_array(schema: Dict[str, Any], context: _ParseContext) -> Static:
    """Parse an array schema into an array or tuple node."""
    prefix_items = schema.get("prefixItems")
    items = schema.get("items")

    # Draft 7 expresses tuples as a list-valued "items"
    if prefix_items is None and isinstance(items, list):
        prefix_items = items

    if prefix_items is not None:
        return tuple_([_parse_schema_dict(s, context) for s in prefix_items])

    if items is None or items is True:
        return unknown_array

    return array(_parse_schema_dict(items, context))


def _parse_enum(values: List[Any]) -> Static:
    """Parse enum/const values into a literals node, unioned with null if present."""
    if not values:
        raise ValueError("enum must contain at least one value")

    for value in values:
        if isinstance(value, (dict, list)):
            raise ValueError(f"Unsupported enum value: {value!r}")

    non_null = [v for v in values if v is not None]
    has_null = len(non_null) < len(values)

    if not non_null:
        return null
    if has_null:
        return union([literals(non_null), null])
    return literals(non_null)


def _parse_union(schemas: List[Any], context: _ParseContext) -> Static:
    """Parse anyOf/oneOf members into a union node."""
    if not schemas:
        raise ValueError("anyOf/oneOf must contain at least one schema")
    return union([_parse_schema_dict(s, context) for s in schemas])


def _parse_intersection(schemas: List[Any], context: _ParseContext) -> Static:
    """Parse allOf members into an intersection node (a single member is returned as is)."""
    if not schemas:
        raise ValueError("allOf must contain at least one schema")

    members = [_parse_schema_dict(s, context) for s in schemas]
    if len(members) == 1:
        return members[0]
    return intersection(members)


def _parse_sum(schemas: List[Any], discriminator: Dict[str, Any], context: _ParseContext) -> Static:
    """
    Parse a discriminated oneOf into a sum node.

    Tag values are taken from the discriminator mapping, then from each member's
    ``const``/``enum`` on the discriminant property, falling back to the
    member's position. Members whose tags collide are rendered as a plain
    union instead.
    """
    if not schemas:
        raise ValueError("oneOf must contain at least one schema")

    tag = discriminator["propertyName"]
    tags_by_ref = {ref: value for value, ref in discriminator.get("mapping", {}).items()}

    tags = [_member_tag(member, tag, tags_by_ref, context, i) for i, member in enumerate(schemas)]
    nodes = [_parse_schema_dict(member, context) for member in schemas]

    members = dict(zip(tags, nodes))
    if len(members) != len(nodes):
        # Colliding tags would drop members from the sum
        logger.warning(f"Duplicate discriminator values for '{tag}': {tags}; rendering as a union")
        return union(nodes)

    return sum_(tag)(members)


def _member_tag(
    member: Any,
    tag: str,
    tags_by_ref: Dict[str, Any],
    context: _ParseContext,
    position: int
) -> Any:
    if not isinstance(member, dict):
        return position

    if "$ref" in member:
        if member["$ref"] in tags_by_ref:
            return tags_by_ref[member["$ref"]]
        member = _resolve_pointer(context.root, member["$ref"])
        if not isinstance(member, dict):
            return position

    properties = member.get("properties")
    discriminant = properties.get(tag) if isinstance(properties, dict) else None
    if isinstance(discriminant, dict):
        if "const" in discriminant:
            value = discriminant["const"]
        elif discriminant.get("enum"):
            value = discriminant["enum"][0]
        else:
            value = None
        # Only scalar values can key the sum
        if isinstance(value, (str, int, float, bool)):
            return value

    return position


def _parse_ref(ref: str, context: _ParseContext) -> Static:
    """
    Parse a ``$ref`` into the lazy node of its target.

    Every reference to the same target within one parse shares one lazy node,
    which is what makes recursive definitions terminate.
    """
    existing = context.refs.get(ref)
    if existing is not None:
        return existing

    target = _resolve_pointer(context.root, ref)
    logger.debug(f"Resolved reference {ref}")

    node = lazy(lambda: _parse_schema_dict(target, context), namer=context.namer)
    context.refs[ref] = node
    return node


def _resolve_pointer(root: Any, ref: str) -> Any:
    """
    Resolve a local JSON pointer reference (e.g. "#/$defs/Node") against the root.

    Raises:
        ValueError: If the reference is not local or cannot be resolved
    """
    if not isinstance(ref, str) or not ref.startswith("#"):
        raise ValueError(f"Only local references are supported, got: {ref!r}")

    target = root
    pointer = ref[1:]
    if not pointer:
        return target

    for part in pointer.lstrip("/").split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if isinstance(target, dict) and part in target:
            target = target[part]
        elif isinstance(target, list) and part.isdigit() and int(part) < len(target):
            target = target[int(part)]
        else:
            raise ValueError(f"Unresolvable reference: {ref}")

    return target


def normalize_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize a JSON Schema for easier processing.

    This function adds default values for missing fields of object and array
    schemas; other schemas are returned as a shallow copy.

    Example:
        ```python
        normalize_schema({"type": "object"})
        # {"type": "object", "properties": {}, "required": []}
        ```
    """
    normalized = schema.copy()

    schema_type = normalized.get("type")

    if schema_type == "object":
        normalized.setdefault("properties", {})
        normalized.setdefault("required", [])

    elif schema_type == "array":
        if "items" not in normalized and "prefixItems" not in normalized:
            # Default to any type
            normalized["items"] = {}

    return normalized


def validate_schema(schema: Any) -> None:
    """
    Validate that a schema is well-formed and supported by the parser.

    Args:
        schema: JSON Schema dictionary (or boolean schema)

    Raises:
        ValueError: If schema is invalid or uses unsupported features

    Example:
        ```python
        schema = {"type": "unknown"}
        validate_schema(schema)  # Raises ValueError
        ```
    """
    _validate_subschema(schema, schema)


def _validate_subschema(schema: Any, root: Any) -> None:
    if isinstance(schema, bool):
        return
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be an object or boolean, got: {type(schema).__name__}")

    # Check for unsupported features
    for keyword in UNSUPPORTED_KEYWORDS:
        if keyword in schema:
            raise ValueError(f"Keyword '{keyword}' is not supported")

    if "$ref" in schema:
        _resolve_pointer(root, schema["$ref"])

    # Check type is valid
    schema_type = schema.get("type")

    if schema_type is not None:
        if isinstance(schema_type, str):
            if schema_type not in VALID_TYPES:
                raise ValueError(f"Invalid type: {schema_type}")
        elif isinstance(schema_type, list):
            for t in schema_type:
                if t not in VALID_TYPES:
                    raise ValueError(f"Invalid type in type array: {t}")
        else:
            raise ValueError(f"Type must be string or array, got: {type(schema_type)}")

    if "enum" in schema:
        _parse_enum(schema["enum"])

    # Validate nested schemas
    for keyword in ("properties", "definitions", "$defs"):
        for sub_schema in schema.get(keyword, {}).values():
            _validate_subschema(sub_schema, root)

    items = schema.get("items")
    if isinstance(items, list):
        for sub_schema in items:
            _validate_subschema(sub_schema, root)
    elif items is not None:
        _validate_subschema(items, root)

    if isinstance(schema.get("additionalProperties"), dict):
        _validate_subschema(schema["additionalProperties"], root)

    for keyword in ("prefixItems", "anyOf", "oneOf", "allOf"):
        for sub_schema in schema.get(keyword, []):
            _validate_subschema(sub_schema, root)
