from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Optional

from rich import box
from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from brickset.orchestrator import QueryResult


def _format_scalar(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, (set, frozenset)):
        return ", ".join(sorted(_format_scalar(v) for v in value)) or "-"
    return str(value)


def render_value(value: Any) -> RenderableType:
    """
    Build a rich renderable for a query result value.

    Mappings become two-column tables, sequences one item per line.
    """
    if value is None:
        return Text("no result", style="dim")

    if isinstance(value, Mapping):
        if not value:
            return Text("(none)", style="dim")
        table = Table(box=box.SIMPLE, show_header=True)
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value", justify="right", style="magenta")
        for key, item in value.items():
            table.add_row(_format_scalar(key), _format_scalar(item))
        return table

    if isinstance(value, (list, tuple)):
        if not value:
            return Text("(none)", style="dim")
        return Text("\n".join(_format_scalar(item) for item in value))

    return Text(_format_scalar(value), style="bold green")


def print_results(results: List[QueryResult], console: Optional[Console] = None) -> None:
    """
    Render query results, each under its label.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    for res in results:
        console.rule(f"[bold]{res['label']}[/bold]", align="left")
        console.print(render_value(res["value"]))


def to_jsonable(value: Any) -> Any:
    """Convert a query result value into JSON-compatible data."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(to_jsonable(k)): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(to_jsonable(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def results_to_json(results: List[QueryResult]) -> List[dict]:
    return [
        {"query": res["query"], "label": res["label"], "value": to_jsonable(res["value"])}
        for res in results
    ]


__all__ = ["print_results", "render_value", "results_to_json", "to_jsonable"]
