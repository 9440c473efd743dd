"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted schemas and signatures
- Reference declaration tables
- Error messages
- Success/failure indicators
"""

import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from static_schema.validation import ValidationError

console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    json_str = data if isinstance(data, str) else json.dumps(data, indent=2)
    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        console.print(Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan"))
    else:
        console.print(syntax)


def print_schema(schema: Dict, title: str = "Schema") -> None:
    """Print a schema with syntax highlighting."""
    print_json(schema, title)


def print_signature(signature: str, title: str = "Signature") -> None:
    """Print a rendered signature with TypeScript highlighting."""
    syntax = Syntax(signature, "typescript", theme="monokai", line_numbers=False, word_wrap=True)
    console.print(Panel(syntax, title=f"[bold]{title}[/bold]", border_style="green"))


def print_declarations(declarations: Dict[str, str]) -> None:
    """
    Print the reference declaration table.

    Args:
        declarations: Mapping of reference name to its full expansion
    """
    if not declarations:
        print_info("No recursive references were rendered")
        return

    table = Table(title="Reference Declarations", show_header=True, header_style="bold cyan")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Expansion", style="white")

    for name, expansion in declarations.items():
        table.add_row(Text(name), Text(expansion))

    console.print()
    console.print(table)
    console.print()


def print_validation_errors(errors: List[ValidationError]) -> None:
    """
    Print schema check errors in a formatted list.

    Args:
        errors: List of schema check errors
    """
    if not errors:
        return

    console.print()
    console.print("[bold red]Schema Errors:[/bold red]")
    for error in errors:
        console.print(f"  [red]•[/red] {escape(error.path)}: {escape(error.message)}")
    console.print()


def print_separator() -> None:
    """Print a visual separator line."""
    console.print("[dim]" + "─" * 70 + "[/dim]")
