"""Command-line interface for genproc code generation."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from genproc.generator.config import GeneratorConfig
from genproc.generator.golang import EmitError
from genproc.generator.parser import SourceError
from genproc.generator.pipeline import run
from genproc.generator.types import GenerationReport


def _configure_logging(console: Console) -> None:
    """Send genproc progress lines to the console."""
    logger = logging.getLogger("genproc")
    logger.setLevel(logging.INFO)

    # Reset handlers so repeated invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


@click.command()
@click.argument("root", default=".", type=click.Path(file_okay=False, path_type=Path))
def cli(root: Path) -> None:
    """Generate net message handlers for +NetMsg+ structs found under ROOT."""
    console = Console()
    _configure_logging(console)

    config = GeneratorConfig(root=root)

    try:
        report = run(config)
    except (SourceError, EmitError) as e:
        console.print(f"[bold red]error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    _output_summary(console, report)


def _output_summary(console: Console, report: GenerationReport) -> None:
    """Print the run report using rich text formatting."""
    console.print()
    console.print("[bold cyan]Summary[/bold cyan]")

    table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    table.add_column("Label", style="dim")
    table.add_column("Value", style="white", justify="right")

    table.add_row("Files scanned", str(report.files))
    table.add_row("Handlers written", str(len(report.written)))
    table.add_row("Skipped", str(len(report.skipped)))
    table.add_row("Conflicts", str(len(report.conflicts)))

    console.print(table)

    for path in report.conflicts:
        console.print(f"[yellow]conflict:[/yellow] {escape(str(path))} written more than once")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
