"""
Schema document checking module.

This module checks JSON Schema documents before they are rendered, reporting
every problem with its location rather than failing on the first one.

Components:
    - validator: Meta-schema check using jsonschema plus the parser's
      supported-subset check

Check Flow:
    1. Validate the document against the Draft 7 meta-schema
    2. If structurally valid, check it only uses supported keywords
    3. Collect all errors with path, expected and actual values

Example:
    ```python
    from static_schema.validation import check_schema, format_validation_errors

    result = check_schema({"type": "object", "not": {"type": "null"}})
    if not result.is_valid:
        print(format_validation_errors(result.errors))
    ```
"""

from static_schema.validation.validator import (
    check_schema,
    quick_check,
    ValidationResult,
    ValidationError,
    format_validation_errors
)

__all__ = [
    "check_schema",
    "quick_check",
    "ValidationResult",
    "ValidationError",
    "format_validation_errors",
]
