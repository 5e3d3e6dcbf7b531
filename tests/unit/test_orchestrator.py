from __future__ import annotations

import pytest

from brickset.domain.models import PackagingType
from brickset.orchestrator import available_queries, run_queries
from brickset.queries import DEFAULT_MIN_PIECES

EXPECTED_QUERY_COUNT = 11


def test_available_queries_keep_demonstration_order():
    names = available_queries()

    assert len(names) == EXPECTED_QUERY_COUNT
    assert names[0] == "numbers_with_at_most_two_tags"
    assert names[-1] == "sorted_tags_of_subthemed_sets"


def test_run_all_queries_returns_one_labelled_result_each(make_set):
    records = [make_set(theme="City", tags=["Microscale"], packaging_type="Box")]

    results = run_queries(records)

    assert [r["query"] for r in results] == available_queries()
    assert all(r["label"] for r in results)
    by_name = {r["query"]: r["value"] for r in results}
    assert by_name["microscale_tag_count"] == 1
    assert by_name["packaging_type_summary"] == {PackagingType.BOX: 1}
    assert by_name["all_sets_have_200_pieces"] is True


def test_run_selected_queries_in_catalog_order(make_set):
    records = [make_set(pieces=10), make_set(pieces=20)]

    results = run_queries(records, query_names=["sum_of_pieces", "microscale_tag_count"])

    assert [r["query"] for r in results] == ["microscale_tag_count", "sum_of_pieces"]
    assert results[1]["value"] == 30


def test_all_keyword_runs_everything():
    assert len(run_queries([], query_names=["all"])) == EXPECTED_QUERY_COUNT


def test_empty_catalog_yields_no_result_values():
    by_name = {r["query"]: r["value"] for r in run_queries([])}

    assert by_name["sum_of_pieces"] is None
    assert by_name["shortest_theme_name"] is None
    assert by_name["all_sets_have_200_pieces"] is True
    assert by_name["sets_per_theme"] == {}


def test_unknown_query_lists_available_names():
    with pytest.raises(ValueError, match="Unknown query 'bogus'. Available: "):
        run_queries([], query_names=["bogus"])


def test_piece_check_uses_default_minimum(make_set):
    records = [make_set(pieces=DEFAULT_MIN_PIECES)]

    results = run_queries(records, query_names=["all_sets_have_200_pieces"])

    assert results[0]["value"] is True
    assert str(DEFAULT_MIN_PIECES) in results[0]["label"]
    below = run_queries([make_set(pieces=DEFAULT_MIN_PIECES - 1)], ["all_sets_have_200_pieces"])
    assert below[0]["value"] is False
