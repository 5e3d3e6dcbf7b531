"""
Analytical queries over the Brickset catalog.

Every query is a pure function taking the full record sequence as its first
argument. Queries never print and never mutate their input. Absent attributes
(``None``) never match a predicate and never contribute to an aggregate;
aggregates and extrema over nothing return ``None``.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Set

from brickset.domain.models import LegoSet, PackagingType

DEFAULT_MIN_PIECES = 200


def numbers_with_at_most_tags(records: Sequence[LegoSet], max_tags: int) -> List[str]:
    """
    Return the numbers of sets carrying at most `max_tags` tags.

    Sets without a tag collection are excluded rather than counted as having
    zero tags. Sets without a number have nothing to report and are skipped.
    """
    return [
        record.number
        for record in records
        if record.number is not None
        and record.tags is not None
        and len(record.tags) <= max_tags
    ]


def sum_of_pieces(records: Sequence[LegoSet]) -> Optional[int]:
    """Total piece count, or None when no set has a piece count."""
    counts = [record.pieces for record in records if record.pieces is not None]
    if not counts:
        return None
    return sum(counts)


def names_with_same_first_and_last_letter(records: Sequence[LegoSet]) -> List[str]:
    """
    Names whose lowercased first character equals the last character.

    Only the first character is lowercased: "Ada" matches, "AdA" does not.
    """
    return [
        record.name
        for record in records
        if record.name and record.name.lower()[0] == record.name[-1]
    ]


def packaging_type_summary(records: Sequence[LegoSet]) -> Dict[PackagingType, int]:
    """Number of sets per packaging type."""
    summary: Dict[PackagingType, int] = {}
    for record in records:
        summary[record.packaging_type] = summary.get(record.packaging_type, 0) + 1
    return summary


def names_starting_with(records: Sequence[LegoSet], prefix: str) -> List[str]:
    """Names starting with `prefix`, compared case-insensitively."""
    wanted = prefix.lower()
    return [
        record.name
        for record in records
        if record.name is not None and record.name.lower().startswith(wanted)
    ]


def count_sets_with_tag(records: Sequence[LegoSet], tag: str) -> int:
    """Number of sets tagged with exactly `tag` (case-sensitive)."""
    return sum(1 for record in records if record.tags is not None and tag in record.tags)


def _themes(records: Iterable[LegoSet]) -> Iterable[str]:
    return (record.theme for record in records if record.theme is not None)


def theme_with_shortest_name(records: Sequence[LegoSet]) -> Optional[str]:
    """
    The theme with the fewest characters.

    Themes are compared left to right; on equal length the theme encountered
    first is kept.
    """
    shortest: Optional[str] = None
    for theme in _themes(records):
        if shortest is None or len(theme) < len(shortest):
            shortest = theme
    return shortest


def themes_with_subthemes(records: Sequence[LegoSet]) -> Dict[str, Set[str]]:
    """
    Map each theme to the distinct subthemes seen under it.

    Themes whose sets have no subtheme map to an empty set.
    """
    mapping: Dict[str, Set[str]] = {}
    for record in records:
        if record.theme is None:
            continue
        subthemes = mapping.setdefault(record.theme, set())
        if record.subtheme is not None:
            subthemes.add(record.subtheme)
    return mapping


def all_sets_have_at_least_pieces(
    records: Sequence[LegoSet], minimum: int = DEFAULT_MIN_PIECES
) -> bool:
    """
    Whether every set with a known piece count has at least `minimum` pieces.

    True for an empty catalog.
    """
    return all(record.pieces >= minimum for record in records if record.pieces is not None)


def sets_per_theme(records: Sequence[LegoSet]) -> Dict[str, int]:
    """Number of sets per theme."""
    counts: Dict[str, int] = {}
    for theme in _themes(records):
        counts[theme] = counts.get(theme, 0) + 1
    return counts


def sorted_distinct_tags_of_subthemed_sets(records: Sequence[LegoSet]) -> List[str]:
    """Sorted distinct tags of the sets that have both a subtheme and tags."""
    tags: Set[str] = set()
    for record in records:
        if record.subtheme is not None and record.tags is not None:
            tags.update(record.tags)
    return sorted(tags)


__all__ = [
    "DEFAULT_MIN_PIECES",
    "all_sets_have_at_least_pieces",
    "count_sets_with_tag",
    "names_starting_with",
    "names_with_same_first_and_last_letter",
    "numbers_with_at_most_tags",
    "packaging_type_summary",
    "sets_per_theme",
    "sorted_distinct_tags_of_subthemed_sets",
    "sum_of_pieces",
    "theme_with_shortest_name",
    "themes_with_subthemes",
]
