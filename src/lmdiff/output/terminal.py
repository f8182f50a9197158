"""Rich terminal reporter: warnings and run summary on stderr."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lmdiff.context.models import ReviewContext

_KIND_LABEL = {
    "classify": "skipped",
    "walk": "skipped dir",
    "content": "placeholder",
}


def render_diagnostics(ctx: ReviewContext, console: Optional[Console] = None) -> None:
    """Print one warning line per Diagnostic."""
    console = console or Console(stderr=True)
    for diag in ctx.diagnostics:
        console.print(f"[yellow]Warning:[/yellow] {escape(diag.message)}", highlight=False)


def render_summary(ctx: ReviewContext, console: Optional[Console] = None) -> None:
    """Print a table of the resolved files followed by counts."""
    console = console or Console(stderr=True)
    placeholders = set(ctx.placeholder_paths)

    table = Table(title=f"Changes against {ctx.ref}", title_style="bold", border_style="dim")
    table.add_column("File", style="magenta")
    table.add_column("Lines", justify="right", style="green")
    table.add_column("Status", justify="center")

    for path, content in ctx.contents.items():
        if path in placeholders:
            table.add_row(escape(path), "-", "[red]placeholder[/red]")
        else:
            table.add_row(escape(path), str(len(content.splitlines())), "[green]ok[/green]")

    for diag in ctx.diagnostics:
        if diag.kind != "content":
            table.add_row(escape(diag.path), "-", f"[yellow]{_KIND_LABEL[diag.kind]}[/yellow]")

    console.print()
    console.print(table)
    console.print(f"[dim]Changed entries:[/dim] {len(ctx.change_set)}")
    console.print(f"[dim]Files resolved:[/dim]  {ctx.file_count}")
    console.print(f"[dim]Placeholders:[/dim]    {len(placeholders)}")
    console.print(f"[dim]Warnings:[/dim]        {len(ctx.diagnostics)}")
