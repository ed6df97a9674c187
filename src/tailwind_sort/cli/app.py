import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from tailwind_sort.cli.format import format_command
from tailwind_sort.cli.sort import inspect_command, sort_command
from tailwind_sort.cli.watch import watch

app = typer.Typer(
    name="tailwind-sort",
    help="Tailwind Sort CLI: order utility classes in markup and template files.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


app.command("format")(format_command)
app.command("sort")(sort_command)
app.command("inspect")(inspect_command)
app.command("watch")(watch)


def main() -> None:
    app()
