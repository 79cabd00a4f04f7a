"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer
from rich.table import Table

import pyostream as ps

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, Row, collect_timings, select

app = typer.Typer(help="Benchmarks for pyostream developments.")


def _render(rows: list[Row]) -> Table:
    table = Table(title="Median time per 10 calls", show_header=True)
    table.add_column("Category", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Size", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Median (ms)", justify="right", style="green")
    ps.from_(rows).for_each(
        lambda row: table.add_row(
            row.category,
            row.name,
            str(row.size),
            str(row.runs),
            f"{row.median * 1000:.4f}",
        )
    )
    return table


@app.command(name="list")
def list_benchmarks() -> None:
    """List registered benchmarks."""
    ps.from_(BENCHMARKS).for_each(
        lambda b: CONSOLE.print(f"{b.category}: {b.name}", style="white")
    )


@app.command()
def run(
    *,
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only run benchmarks of this category."),
    ] = None,
) -> None:
    """Run benchmarks and print their median timings."""
    selected = select(BENCHMARKS, category)
    if not selected:
        CONSOLE.print(f"No benchmark in category {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(_render(collect_timings(selected)))


if __name__ == "__main__":
    app()
