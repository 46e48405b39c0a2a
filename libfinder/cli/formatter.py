from pathlib import Path
from typing import List

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


def format_table(data, columns, title=None):
    """Formats data into a rich table."""
    table = Table(title=title)
    for col in columns:
        table.add_column(col)
    for row in data:
        table.add_row(*[str(item) for item in row])
    return table


def format_candidates(name: str, candidates: List[Path]) -> Table:
    """Numbered listing of ambiguous matches; the numbers are valid --select values."""
    return format_table(
        [(i, path) for i, path in enumerate(candidates, start=1)],
        ["#", "Path"],
        title=f"{len(candidates)} candidates for {name}",
    )
