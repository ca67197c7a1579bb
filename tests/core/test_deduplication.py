"""
Tests for the deduplication module.

Tests cover:
- resolve_name_conflicts: context qualification, unresolved collisions,
  full-path fallback, observer reporting
- merge_identical_enums: value-identity merging and survivor choice
- deduplicate_enums: both passes together, including pipeline properties
- score_merge_candidate / choose_best_for_merging: scoring and tie-breaks
"""

import re

import pytest

from core.deduplication import (
    choose_best_for_merging,
    contextual_name,
    deduplicate_enums,
    merge_identical_enums,
    resolve_name_conflicts,
    score_merge_candidate,
)
from core.classification import HeuristicPathClassifier
from models import PathContext


def _names(records):
    return [r.name for r in records]


# ============================================================================
# Tests for resolve_name_conflicts
# ============================================================================


@pytest.mark.unit
def test_unique_names_pass_through(record_factory):
    records = [
        record_factory("status", ["a", "b"], "type Status"),
        record_factory("color", ["red", "blue"], "type Color"),
    ]

    assert resolve_name_conflicts(records) == records


@pytest.mark.unit
def test_context_qualifies_colliding_names(record_factory):
    records = [
        record_factory("type", ["optionA", "optionB"], "GetV1ResourcesData.query.type"),
        record_factory("type", ["methodX", "methodY"], "PostV1ResourcesData.body.type"),
        record_factory("type", ["resultOne", "resultTwo"], "ResponseData.type"),
    ]

    resolved = resolve_name_conflicts(records)

    assert _names(resolved) == ["queryType", "requestType", "responseType"]


@pytest.mark.unit
def test_unqualified_record_keeps_name(record_factory):
    """`account.type` has no context and keeps its name."""
    records = [
        record_factory("userType", ["admin", "editor", "viewer"], "query.type"),
        record_factory("userType", ["basic", "premium", "enterprise"], "account.type"),
    ]

    resolved = resolve_name_conflicts(records)

    assert _names(resolved) == ["queryType", "userType"]


@pytest.mark.unit
def test_qualifier_without_field_uses_old_name(record_factory):
    records = [
        record_factory("orderStatus", ["a", "b"], "type OrderStatus"),
        record_factory("orderStatus", ["c", "d"], "OrderStatusResponse"),
    ]

    resolved = resolve_name_conflicts(records)

    assert _names(resolved) == ["orderStatus", "responseOrderStatus"]


@pytest.mark.unit
def test_remaining_collision_falls_back_to_full_path(record_factory, tracking_observer):
    """Unqualified members with different values get their full-path name."""
    account = record_factory("type", ["basic", "premium"], "account.type")
    billing = record_factory("type", ["card", "invoice"], "billing.type")

    resolved = resolve_name_conflicts([account, billing], observer=tracking_observer)

    assert _names(resolved) == ["accountType", "billingType"]
    tracking_observer.on_unresolved_conflict.assert_called_once_with(
        "type", [account, billing]
    )


@pytest.mark.unit
def test_identical_collisions_left_for_merge(record_factory, tracking_observer):
    """Same-named records with the same values are not renamed apart."""
    records = [
        record_factory("Status", ["active", "inactive"], "type Status"),
        record_factory("Status", ["active", "inactive"], "property: status"),
    ]

    resolved = resolve_name_conflicts(records, observer=tracking_observer)

    assert _names(resolved) == ["Status", "Status"]
    tracking_observer.on_unresolved_conflict.assert_not_called()


@pytest.mark.unit
def test_qualified_collision_with_different_values_separated(record_factory):
    """Two request-body `kind` fields with different values must not share a name."""
    records = [
        record_factory("kind", ["a", "b"], "PostV1PetsData.body.kind"),
        record_factory("kind", ["x", "y"], "PutV1ToysData.body.kind"),
    ]

    resolved = resolve_name_conflicts(records)

    assert _names(resolved) == ["postV1PetsDataBodyKind", "putV1ToysDataBodyKind"]


@pytest.mark.unit
def test_context_rename_colliding_with_other_group_separated(record_factory):
    """A qualified name that is already taken by another record falls back too."""
    taken = record_factory("queryType", ["x", "y"], "filters.queryType")
    query = record_factory("type", ["a", "b"], "GetV1ItemsData.query.type")
    body = record_factory("type", ["c", "d"], "PostV1ItemsData.body.type")

    resolved = resolve_name_conflicts([taken, query, body])

    assert _names(resolved) == [
        "filtersQueryType",
        "getV1ItemsDataQueryType",
        "requestType",
    ]
    assert len(set(_names(resolved))) == 3


@pytest.mark.unit
def test_renames_reported(record_factory, tracking_observer):
    record = record_factory("type", ["a", "b"], "query.type")
    other = record_factory("type", ["c", "d"], "ResponseData.type")

    resolve_name_conflicts([record, other], observer=tracking_observer)

    assert tracking_observer.on_conflict_resolved.call_count == 2
    old_name, new_record = tracking_observer.on_conflict_resolved.call_args_list[0].args
    assert old_name == "type"
    assert new_record.name == "queryType"


@pytest.mark.unit
def test_resolve_does_not_mutate_input(record_factory):
    record = record_factory("type", ["a", "b"], "query.type")
    other = record_factory("type", ["c", "d"], "ResponseData.type")

    resolve_name_conflicts([record, other])

    assert record.name == "type"
    assert other.name == "type"


@pytest.mark.mock
def test_custom_classifier_used(record_factory, mocker):
    classifier = mocker.Mock()
    classifier.classify.return_value = PathContext.RESPONSE
    records = [
        record_factory("kind", ["a"], "x.kind"),
        record_factory("kind", ["b"], "y.kind"),
    ]

    resolved = resolve_name_conflicts(records, classifier=classifier)

    assert classifier.classify.call_count == 2
    # Both qualify to the same name with different values: full-path fallback
    assert _names(resolved) == ["xKind", "yKind"]


@pytest.mark.unit
def test_contextual_name(record_factory):
    classifier = HeuristicPathClassifier()

    assert contextual_name(record_factory("t", ["a"], "query.type"), classifier) == "queryType"
    assert contextual_name(record_factory("t", ["a"], "account.type"), classifier) is None


# ============================================================================
# Tests for merge_identical_enums
# ============================================================================


@pytest.mark.unit
def test_merge_identical_values(record_factory, tracking_observer):
    records = [
        record_factory("queryFormat", ["formatA", "formatB"], "GetV1ItemsData.query.format"),
        record_factory("requestFormat", ["formatB", "formatA"], "PostV1ItemsData.body.format"),
    ]

    merged = merge_identical_enums(records, tracking_observer)

    assert _names(merged) == ["queryFormat"]
    tracking_observer.on_merged.assert_called_once_with(records[0], records)


@pytest.mark.unit
def test_distinct_values_survive(record_factory, tracking_observer):
    records = [
        record_factory("queryType", ["admin", "editor"], "query.type"),
        record_factory("userType", ["basic", "premium"], "account.type"),
    ]

    assert merge_identical_enums(records, tracking_observer) == records
    tracking_observer.on_merged.assert_not_called()


@pytest.mark.unit
def test_merge_is_idempotent(record_factory):
    records = [
        record_factory("userRole", ["admin", "user"], "ResponseData.userRole"),
        record_factory("requestUserRole", ["user", "admin"], "RequestData.userRole"),
        record_factory("mode", ["dark", "light"], "Root.mode"),
    ]

    once = merge_identical_enums(records)

    assert merge_identical_enums(once) == once


# ============================================================================
# Tests for scoring
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "name,expected",
    [
        ("userRole", 42),
        ("formatValues", 38),
        ("queryFormat", 29),
        ("requestUserRole", 25),
        ("dataMode", 22),
    ],
)
def test_score_merge_candidate(name, expected):
    assert score_merge_candidate(name) == expected


@pytest.mark.unit
def test_choose_best_prefers_first_on_tie(record_factory):
    first = record_factory("alpha", ["a"], "x.alpha")
    second = record_factory("gamma", ["a"], "y.gamma")

    assert choose_best_for_merging([first, second]) is first


# ============================================================================
# Tests for deduplicate_enums
# ============================================================================


@pytest.mark.unit
def test_merges_truly_identical_enums(record_factory):
    records = [
        record_factory("Status", ["active", "inactive"], "type Status"),
        record_factory("Status", ["active", "inactive"], "property: status"),
    ]

    result = deduplicate_enums(records)

    assert len(result) == 1
    assert result[0].original_path == "type Status"


@pytest.mark.unit
def test_merges_identical_arrays_regardless_of_context(record_factory):
    records = [
        record_factory("userRole", ["admin", "user", "guest"], path)
        for path in (
            "ResponseData.userRole",
            "RequestData.userRole",
            "AnotherContext.userRole",
            "YetAnotherContext.userRole",
        )
    ]

    result = deduplicate_enums(records)

    assert _names(result) == ["userRole"]


@pytest.mark.unit
def test_keeps_distinct_enums_with_same_name(record_factory):
    records = [
        record_factory("userType", ["admin", "editor", "viewer"], "query.type"),
        record_factory("userType", ["basic", "premium", "enterprise"], "account.type"),
    ]

    result = deduplicate_enums(records)

    assert sorted(_names(result)) == ["queryType", "userType"]


@pytest.mark.unit
def test_four_identical_formats_collapse(record_factory):
    records = [
        record_factory("format", ["formatA", "formatB"], path)
        for path in (
            "GetV1ItemsData.query.format",
            "PostV1ItemsData.body.format",
            "PutV1ItemsData.body.format",
            "ResponseData.format",
        )
    ]

    result = deduplicate_enums(records)

    assert _names(result) == ["queryFormat"]


@pytest.mark.unit
def test_value_sets_preserved(record_factory):
    """Every distinct value set of the input survives exactly once."""
    records = [
        record_factory("type", ["a", "b"], "GetV1XData.query.type"),
        record_factory("type", ["b", "a"], "PostV1XData.body.type"),
        record_factory("type", ["c"], "account.type"),
        record_factory("type", ["d"], "billing.type"),
        record_factory("mode", ["c"], "Root.mode"),
    ]

    result = deduplicate_enums(records)
    output_keys = [r.values_key for r in result]

    assert sorted(output_keys) == sorted({r.values_key for r in records})


@pytest.mark.unit
def test_no_numeric_suffixes(record_factory):
    records = [
        record_factory("type", [f"v{i}", "shared"], f"Ctx{i}.type") for i in range(5)
    ]

    result = deduplicate_enums(records)

    assert len(result) == 5
    assert len(set(_names(result))) == 5
    assert not any(re.search(r"\d$", name) for name in _names(result))
