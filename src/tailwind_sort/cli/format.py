from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from tailwind_sort.config import ResolvedConfiguration, load_config
from tailwind_sort.core.format import format_paths

console = Console()

DialectOption = Annotated[
    str | None, typer.Option(help="Force a dialect (flat, vue, svelte, astro, wrapped-template, ...).")
]
ConfigOption = Annotated[str | None, typer.Option(help="Path to a JSON config file.")]
AttributeOption = Annotated[
    list[str] | None, typer.Option("--attribute", "-a", help="Attribute holding class lists (repeatable).")
]
FunctionOption = Annotated[
    list[str] | None, typer.Option("--function", "-f", help="Function taking class strings (repeatable).")
]


def build_configuration(
    config: str | None,
    attributes: list[str] | None = None,
    functions: list[str] | None = None,
) -> ResolvedConfiguration:
    """Load the config file and apply command line overrides on top of it."""
    resolved = load_config(config)
    updates: dict[str, list[str]] = {}
    if attributes:
        updates["tailwind_attributes"] = attributes
    if functions:
        updates["tailwind_functions"] = functions
    if not updates:
        return resolved
    return resolved.model_copy(update={"config": resolved.config.model_copy(update=updates)})


def format_command(
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to format.")],
    check: Annotated[bool, typer.Option("--check", help="Report files that would change without writing.")] = False,
    dialect: DialectOption = None,
    config: ConfigOption = None,
    attribute: AttributeOption = None,
    function: FunctionOption = None,
) -> None:
    """Sort classes in files, rewriting them in place."""
    try:
        resolved = build_configuration(config, attribute, function)
        results = format_paths(paths, resolved.config, dialect, write=not check, extensions=resolved.file_extensions)
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]", highlight=False)
        raise typer.Exit(2) from None

    changed = [r for r in results if r.changed]
    failed = [r for r in results if r.error]
    label = "[yellow]Would reformat[/yellow]" if check else "[green]Formatted[/green]"
    for result in changed:
        console.print(f"{label} {result.path}")
    for result in failed:
        console.print(f"[red]Failed[/red] {result.path}: {result.error}")
    console.print(f"{len(results)} file(s) checked, {len(changed)} changed, {len(failed)} failed")

    if failed or (check and changed):
        raise typer.Exit(1)
