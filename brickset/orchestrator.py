"""
Driver for the fixed catalog of demonstration queries.

Usage (example from CLI):
    from brickset.orchestrator import run_queries
    from brickset.repository import LegoSetRepository

    results = run_queries(LegoSetRepository().get_all(), query_names=["sum_of_pieces"])
    print(results)

The catalog binds every query to its demonstration arguments and a
human-friendly label; rendering is left to `brickset.reporter`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypedDict

from brickset import queries
from brickset.domain.models import LegoSet
from brickset.utils.logging import get_logger

log = get_logger(__name__)


class QueryResult(TypedDict):
    """Outcome of one catalog query."""

    query: str
    label: str
    value: Any


@dataclass(frozen=True)
class CatalogQuery:
    name: str
    label: str
    run: Callable[[Sequence[LegoSet]], Any]


def _query_catalog() -> Dict[str, CatalogQuery]:
    """Registry of demonstration queries, in execution order."""
    entries = [
        CatalogQuery(
            "numbers_with_at_most_two_tags",
            "LEGO set numbers with at most 2 tags",
            lambda records: queries.numbers_with_at_most_tags(records, 2),
        ),
        CatalogQuery(
            "microscale_tag_count",
            "Number of LEGO sets tagged 'Microscale'",
            lambda records: queries.count_sets_with_tag(records, "Microscale"),
        ),
        CatalogQuery(
            "same_first_and_last_letter",
            "LEGO set names with the same first and last letter",
            queries.names_with_same_first_and_last_letter,
        ),
        CatalogQuery(
            "packaging_type_summary",
            "Packaging types and their frequency",
            queries.packaging_type_summary,
        ),
        CatalogQuery(
            "names_starting_with_rock",
            "LEGO set names starting with 'rock'",
            lambda records: queries.names_starting_with(records, "rock"),
        ),
        CatalogQuery(
            "sum_of_pieces",
            "Total number of pieces",
            queries.sum_of_pieces,
        ),
        CatalogQuery(
            "shortest_theme_name",
            "Theme with the shortest name",
            queries.theme_with_shortest_name,
        ),
        CatalogQuery(
            "themes_with_subthemes",
            "Themes with their distinct subthemes",
            queries.themes_with_subthemes,
        ),
        CatalogQuery(
            "all_sets_have_200_pieces",
            f"Does every set have at least {queries.DEFAULT_MIN_PIECES} pieces?",
            queries.all_sets_have_at_least_pieces,
        ),
        CatalogQuery(
            "sets_per_theme",
            "Number of sets per theme",
            queries.sets_per_theme,
        ),
        CatalogQuery(
            "sorted_tags_of_subthemed_sets",
            "Sorted distinct tags of sets that have a subtheme",
            queries.sorted_distinct_tags_of_subthemed_sets,
        ),
    ]
    return {entry.name: entry for entry in entries}


def available_queries() -> List[str]:
    """List query names in execution order."""
    return list(_query_catalog().keys())


def _resolve_queries(names: List[str]) -> List[CatalogQuery]:
    catalog = _query_catalog()
    unknown = [name for name in names if name not in catalog]
    if unknown:
        raise ValueError(
            f"Unknown query '{unknown[0]}'. Available: {', '.join(catalog)}"
        )
    wanted = set(names)
    return [entry for name, entry in catalog.items() if name in wanted]


def run_queries(
    records: Sequence[LegoSet],
    query_names: Optional[Iterable[str]] = None,
) -> List[QueryResult]:
    """
    Run catalog queries against `records`.

    Parameters
    ----------
    records : Sequence[LegoSet]
        The full, already loaded catalog.
    query_names : iterable[str] | None
        Queries to run. If None or ["all"], runs the whole catalog. Selected
        queries always run in catalog order.

    Returns
    -------
    List[QueryResult]
        One result per executed query.
    """
    names = list(query_names) if query_names is not None else ["all"]
    if len(names) == 1 and names[0] == "all":
        names = available_queries()

    results: List[QueryResult] = []
    for entry in _resolve_queries(names):
        value = entry.run(records)
        log.debug(f"[QUERY] {entry.name}", extra={"query": entry.name, "records": len(records)})
        results.append(QueryResult(query=entry.name, label=entry.label, value=value))

    log.info(
        f"[QUERIES COMPLETE] {len(results)} query/queries executed",
        extra={"queries": [r["query"] for r in results]},
    )
    return results


__all__ = [
    "CatalogQuery",
    "QueryResult",
    "available_queries",
    "run_queries",
]
