"""
Schema document checker with detailed error reporting.

Before a JSON Schema document is rendered, it is worth knowing whether it is a
well-formed schema at all and whether the parser supports every keyword it
uses. This module checks both:
    1. The document against the JSON Schema Draft 7 meta-schema (jsonschema)
    2. The document against the parser's supported subset

Usage:
    ```python
    from static_schema.validation import check_schema

    result = check_schema({"type": "object", "properties": {"age": {"type": "int"}}})
    if not result.is_valid:
        for error in result.errors:
            print(f"{error.path}: {error.message}")
    ```
"""

import logging
from dataclasses import dataclass
from typing import Any, List

from jsonschema import Draft7Validator

from static_schema.schema.parser import validate_schema

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """
    Represents a single problem found in a schema document.

    Attributes:
        path: Path to the problem location in the document (e.g. ".properties.age")
        message: Human-readable error message
        validator: Check that failed (e.g. "enum", "type", "supported")
        expected: What was expected
        actual: What was found
    """
    path: str
    message: str
    validator: str
    expected: Any
    actual: Any


@dataclass
class ValidationResult:
    """
    Result of checking a schema document.

    Attributes:
        is_valid: Whether the document passed every check
        errors: List of problems (empty if valid)
        schema: The checked document
    """
    is_valid: bool
    errors: List[ValidationError]
    schema: Any


def check_schema(schema: Any) -> ValidationResult:
    """
    Check a schema document against the meta-schema and the supported subset.

    Args:
        schema: JSON Schema document

    Returns:
        ValidationResult: Result with every problem found

    Example:
        ```python
        result = check_schema({"type": "string"})
        assert result.is_valid

        result = check_schema({"type": "strin"})
        assert not result.is_valid
        ```
    """
    meta_validator = Draft7Validator(Draft7Validator.META_SCHEMA)

    errors = [_convert_jsonschema_error(error) for error in meta_validator.iter_errors(schema)]

    # The supported-subset check assumes a structurally valid document
    if not errors:
        try:
            validate_schema(schema)
        except ValueError as e:
            errors.append(
                ValidationError(
                    path="root",
                    message=str(e),
                    validator="supported",
                    expected="supported schema keywords",
                    actual="unsupported schema"
                )
            )

    logger.debug(f"Schema check finished with {len(errors)} error(s)")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        schema=schema
    )


def _convert_jsonschema_error(error: Any) -> ValidationError:
    """
    Convert a jsonschema ValidationError to our ValidationError.

    Args:
        error: jsonschema ValidationError raised by the meta-schema

    Returns:
        ValidationError: Our error representation
    """
    path = "." + ".".join(str(p) for p in error.path) if error.path else "root"

    expected = error.schema.get(error.validator, "see meta-schema") if isinstance(error.schema, dict) else "see meta-schema"

    return ValidationError(
        path=path,
        message=error.message,
        validator=error.validator,
        expected=expected,
        actual=error.instance
    )


def format_validation_errors(errors: List[ValidationError]) -> str:
    """
    Format validation errors as a human-readable string.

    Example:
        ```python
        result = check_schema(schema)
        if not result.is_valid:
            print(format_validation_errors(result.errors))
            # Output:
            # Schema check failed with 1 error(s):
            #   1. At .type: 'strin' is not valid under any of the given schemas
            #      Expected: [...]
            #      Got: strin
        ```
    """
    if not errors:
        return "No validation errors"

    lines = [f"Schema check failed with {len(errors)} error(s):"]

    for i, error in enumerate(errors, 1):
        lines.append(f"\n  {i}. At {error.path}: {error.message}")
        lines.append(f"     Expected: {error.expected}")
        lines.append(f"     Got: {error.actual}")

    return "\n".join(lines)


def quick_check(schema: Any) -> bool:
    """Quick check - just returns True/False."""
    return check_schema(schema).is_valid
