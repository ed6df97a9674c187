import asyncio
import contextlib
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from tailwind_sort.cli.format import AttributeOption, ConfigOption, DialectOption, FunctionOption, build_configuration
from tailwind_sort.core.dialects import normalize_dialect
from tailwind_sort.core.ports.watcher import FileWatcherPort
from tailwind_sort.models import FileResult
from tailwind_sort.watcher.watchfiles_adapter import FormatOnChange, WatchfilesWatcher

console = Console()


def _report(result: FileResult) -> None:
    if result.error:
        console.print(f"[red]Failed[/red] {result.path}: {result.error}")
    elif result.changed:
        console.print(f"[green]Formatted[/green] {result.path}")


async def _run(watcher: FileWatcherPort) -> None:
    await watcher.start()
    try:
        await watcher.wait()
    finally:
        await watcher.stop()


def watch(
    directory: Annotated[
        Path, typer.Argument(help="Directory to watch.", exists=True, file_okay=False, dir_okay=True)
    ] = Path("."),
    dialect: DialectOption = None,
    config: ConfigOption = None,
    attribute: AttributeOption = None,
    function: FunctionOption = None,
) -> None:
    """Watch a directory and sort classes in files as they change."""
    try:
        resolved = build_configuration(config, attribute, function)
        forced_dialect = normalize_dialect(dialect) if dialect else None
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]", highlight=False)
        raise typer.Exit(2) from None

    handler = FormatOnChange(resolved.config, forced_dialect, report=_report)
    watcher = WatchfilesWatcher(directory, handler, resolved.file_extensions)

    console.print(f"[green]Watching[/green] {directory} (Ctrl+C to stop)")
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_run(watcher))
