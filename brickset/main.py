from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from brickset.config import get_settings, resolve_data_file
from brickset.orchestrator import available_queries, run_queries
from brickset.reporter import print_results, results_to_json
from brickset.repository import LegoSetRepository, RepositoryLoadError
from brickset.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Brickset catalog query CLI.")
log = get_logger(__name__)


def _load_repository(data_file: Optional[Path]) -> LegoSetRepository:
    try:
        return LegoSetRepository(data_file)
    except RepositoryLoadError as exc:
        log.error("Catalog load failed", extra={"source": str(exc.source)})
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def info(
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-d",
        help="Brickset JSON export to load (default from settings).",
    ),
) -> None:
    """
    Show effective configuration values and the size of the catalog.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    source = data_file or resolve_data_file(settings)
    repository = _load_repository(source)
    typer.echo(
        f"data_file={source} | records={len(repository)} | "
        f"log_level={settings.log_level} env={settings.app_env}"
    )


@app.command()
def run(
    query: str = typer.Option(
        "all",
        "--query",
        "-q",
        help="Query to run (e.g., sum_of_pieces, sets_per_theme, all, list).",
    ),
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        "-d",
        help="Brickset JSON export to load (default from settings).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print results as JSON instead of tables.",
    ),
) -> None:
    """
    Load the catalog once and print the results of the demonstration queries.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    if query == "list":
        typer.echo("Available queries: " + ", ".join(available_queries()))
        return

    repository = _load_repository(data_file or resolve_data_file(settings))
    try:
        results = run_queries(repository.get_all(), query_names=[query])
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    if json_output:
        typer.echo(json.dumps(results_to_json(results), indent=2))
    else:
        print_results(results)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
