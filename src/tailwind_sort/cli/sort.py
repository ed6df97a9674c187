from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tailwind_sort.cli.format import AttributeOption, ConfigOption, DialectOption, FunctionOption, build_configuration
from tailwind_sort.core.dialects import resolve_dialect
from tailwind_sort.core.format import decode_document, plan_document
from tailwind_sort.core.sorter import sort_class_string

console = Console()


def sort_command(
    classes: Annotated[str, typer.Argument(help="Whitespace-separated class list.")],
) -> None:
    """Print a class list in sorted order."""
    typer.echo(sort_class_string(classes))


def inspect_command(
    path: Annotated[Path, typer.Argument(help="File to inspect.")],
    dialect: DialectOption = None,
    config: ConfigOption = None,
    attribute: AttributeOption = None,
    function: FunctionOption = None,
) -> None:
    """List every class literal found in a file with its sorted form."""
    try:
        configuration = build_configuration(config, attribute, function).config
        resolved_dialect = resolve_dialect(dialect, path)
        text = decode_document(path.read_bytes(), str(path))
    except (OSError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]", highlight=False)
        raise typer.Exit(2) from None

    plan = plan_document(
        text, resolved_dialect, configuration.tailwind_attributes, configuration.tailwind_functions
    )
    table = Table(show_lines=False, title=f"{path} ({resolved_dialect.value})")
    for header in ("start", "end", "quote", "raw", "sorted"):
        table.add_column(header)
    for span, sorted_value in plan:
        style = "yellow" if sorted_value != span.raw_value else ""
        table.add_row(
            str(span.start),
            str(span.end),
            Text(span.quote_char),
            Text(span.raw_value),
            Text(sorted_value, style=style),
        )
    console.print(table)
    console.print(f"({len(plan)} rows)")
