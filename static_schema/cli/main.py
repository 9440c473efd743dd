"""
Main CLI entry point using Typer.

This module defines the command-line interface for static-schema using Typer.
It provides two commands: render and check.
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from static_schema.schema.naming import DEFAULT_PREFIX
from static_schema.utils.logging import setup_logging

from .commands import check_command, render_command
from .display import print_error


# Create Typer app
app = typer.Typer(
    name="static-schema",
    help="static-schema - Render JSON Schemas as type signatures",
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("render")
def render(
    schema: Annotated[
        Path,
        typer.Option("--schema", "-s", help="Path to JSON schema file", exists=True, file_okay=True, dir_okay=False)
    ],
    prefix: Annotated[
        str,
        typer.Option("--prefix", help="Prefix of reference names for recursive types")
    ] = DEFAULT_PREFIX,
    start: Annotated[
        int,
        typer.Option("--start", min=0, help="Initial reference counter (first name uses start + 1)")
    ] = 0,
    declarations: Annotated[
        bool,
        typer.Option("--declarations", "-d", help="Show what each reference name stands for")
    ] = False,
    show_schema: Annotated[
        bool,
        typer.Option("--show-schema", help="Display the schema before rendering")
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the signature")
    ] = None,
) -> None:
    """
    Render a JSON Schema file as a type signature.

    Example:
        static-schema render \\
            --schema tree.json \\
            --declarations \\
            --output tree.d.ts
    """
    try:
        render_command(
            schema_path=schema,
            prefix=prefix,
            start=start,
            show_declarations=declarations,
            show_schema=show_schema,
            output_path=output
        )
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.command("check")
def check(
    schema: Annotated[
        Path,
        typer.Option("--schema", "-s", help="Path to JSON schema file", exists=True, file_okay=True, dir_okay=False)
    ],
    show_schema: Annotated[
        bool,
        typer.Option("--show-schema", help="Display the schema")
    ] = False,
) -> None:
    """
    Check a JSON Schema file against the meta-schema and the supported subset.

    Example:
        static-schema check --schema tree.json
    """
    try:
        check_command(schema_path=schema, show_schema=show_schema)
    except Exception as e:
        print_error(f"Command failed: {e}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """
    static-schema - Render JSON Schemas as type signatures.
    """
    if version:
        from static_schema import __version__
        typer.echo(f"static-schema version {__version__}")
        raise typer.Exit()

    setup_logging(level="DEBUG" if verbose else "WARNING")

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for the console script."""
    app()


if __name__ == "__main__":
    cli()
