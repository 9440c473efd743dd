"""
CLI command implementations.

This module contains the business logic for each CLI command:
- render: Render a JSON Schema file as a type signature
- check: Report problems in a JSON Schema file
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from rich.markup import escape

from static_schema.schema import RefNamer, parse_schema, render
from static_schema.validation import check_schema

from .display import (
    console,
    print_declarations,
    print_error,
    print_header,
    print_info,
    print_schema,
    print_separator,
    print_signature,
    print_success,
    print_validation_errors,
)

logger = logging.getLogger(__name__)


def load_schema_file(schema_path: Path) -> Any:
    """
    Load and parse a JSON schema file.

    Args:
        schema_path: Path to schema JSON file

    Returns:
        Parsed schema document

    Raises:
        ValueError: If file doesn't exist or isn't valid JSON
    """
    if not schema_path.exists():
        raise ValueError(f"Schema file not found: {schema_path}")

    try:
        with open(schema_path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in schema file: {e}")


def format_declarations(declarations: Dict[str, str]) -> str:
    """
    Format a declaration table as type alias statements.

    Example:
        ```python
        format_declarations({"$Ref1": "{ next: $Ref1; }"})
        # 'type $Ref1 = { next: $Ref1; };'
        ```
    """
    return "\n".join(f"type {name} = {expansion};" for name, expansion in declarations.items())


def render_command(
    schema_path: Path,
    prefix: str,
    start: int,
    show_declarations: bool,
    show_schema: bool,
    output_path: Optional[Path]
) -> None:
    """
    Execute the render command.

    Args:
        schema_path: Path to JSON schema file
        prefix: Prefix of reference names
        start: Initial reference counter value
        show_declarations: Whether to display the reference declaration table
        show_schema: Whether to display the schema
        output_path: Optional path to save the signature
    """
    print_header("static-schema - Render Signature")

    try:
        schema = load_schema_file(schema_path)
        print_success(f"Loaded schema from: {escape(str(schema_path))}")
    except Exception as e:
        print_error(f"Failed to load schema: {escape(str(e))}")
        raise SystemExit(1)

    if show_schema:
        print_schema(schema)

    namer = RefNamer(prefix=prefix, start=start)

    try:
        node = parse_schema(schema, namer=namer)
        signature = render(node, namer=namer)
    except (ValueError, TypeError) as e:
        print_error(f"Failed to render schema: {escape(str(e))}")
        raise SystemExit(1)

    logger.info(f"Rendered {schema_path} ({len(signature)} characters, {namer.count - start} reference(s))")

    print_separator()
    print_signature(signature)

    declarations = namer.declarations
    if show_declarations:
        print_declarations(declarations)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        text = signature + "\n"
        if show_declarations and declarations:
            text = format_declarations(declarations) + "\n\n" + text
        output_path.write_text(text, encoding="utf-8")
        print_success(f"Signature saved to: {escape(str(output_path))}")


def check_command(schema_path: Path, show_schema: bool) -> None:
    """
    Execute the check command.

    Args:
        schema_path: Path to JSON schema file
        show_schema: Whether to display the schema
    """
    print_header("static-schema - Check Schema")

    try:
        schema = load_schema_file(schema_path)
        print_success(f"Loaded schema from: {escape(str(schema_path))}")
    except Exception as e:
        print_error(f"Failed to load schema: {escape(str(e))}")
        raise SystemExit(1)

    if show_schema:
        print_schema(schema)

    print_separator()
    print_info("Checking...")

    result = check_schema(schema)

    console.print()
    if result.is_valid:
        print_success("Schema check passed!")
    else:
        print_error("Schema check failed")
        print_validation_errors(result.errors)
        raise SystemExit(1)
