"""
Command-line interface module.

This module provides a rich terminal interface for static-schema using Typer and Rich.

Commands:
    - render: Render a JSON Schema file as a type signature
    - check: Report problems in a JSON Schema file

Example Usage:
    ```bash
    # Render a schema
    static-schema render --schema tree.json

    # With the reference declaration table, saved to a file
    static-schema render \\
        --schema tree.json \\
        --declarations \\
        --prefix '$Node' \\
        --output tree.d.ts

    # Check a schema before rendering
    static-schema check --schema tree.json
    ```
"""

from .main import app

__all__ = ["app"]
