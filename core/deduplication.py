"""
Conflict resolution and value-identity merging of named enumerations.

Deduplication runs in two passes over the named records:

1. **Name-collision resolution**: records sharing a name are renamed with a
   context qualifier inferred from their path ("query", "request",
   "response"), e.g. two `type` fields become `queryType` and `requestType`.
   Records whose path yields no qualifier keep their name. Any names that
   still collide afterwards while carrying different value sets fall back to
   their full-path name. Numeric suffixes are never used.
2. **Value-identity merge**: records with the same (order-insensitive) value
   set are collapsed into one survivor chosen by `score_merge_candidate`.

Both passes are pure: input records are never mutated.
"""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import replace

from constants import (
    MERGE_BASE_SCORE,
    MERGE_CONTEXT_BONUS,
    MERGE_CONTEXT_TERMS,
    MERGE_GENERIC_PENALTY,
    MERGE_GENERIC_TERMS,
)
from core.classification import HeuristicPathClassifier, PathClassifier
from core.models import EnumRecord
from core.naming import extract_field_name, full_path_name
from ui.observer import NoOpPipelineObserver, PipelineObserver
from utils import capitalize_first


def deduplicate_enums(
    records: Sequence[EnumRecord],
    classifier: PathClassifier | None = None,
    observer: PipelineObserver | None = None,
) -> list[EnumRecord]:
    """
    Resolve name collisions, then merge records with identical value sets.

    Args:
        records: Named records, in extraction order.
        classifier: Strategy used to qualify colliding names. Defaults to
            HeuristicPathClassifier.
        observer: Receives rename and merge diagnostics. Defaults to a no-op.

    Returns:
        The surviving records. Every distinct value set of the input is
        represented exactly once.
    """
    observer = observer if observer is not None else NoOpPipelineObserver()
    resolved = resolve_name_conflicts(records, classifier, observer)
    return merge_identical_enums(resolved, observer)


def resolve_name_conflicts(
    records: Sequence[EnumRecord],
    classifier: PathClassifier | None = None,
    observer: PipelineObserver | None = None,
) -> list[EnumRecord]:
    """
    Rename records that share a name using the context of their path.

    Output order follows the first appearance of each name, then input order
    within a name group.
    """
    classifier = classifier if classifier is not None else HeuristicPathClassifier()
    observer = observer if observer is not None else NoOpPipelineObserver()

    name_groups: dict[str, list[EnumRecord]] = defaultdict(list)
    for record in records:
        name_groups[record.name].append(record)

    resolved: list[EnumRecord] = []

    for name, group in name_groups.items():
        if len(group) == 1:
            resolved.append(group[0])
            continue

        renamed: list[EnumRecord] = []
        unqualified: list[EnumRecord] = []
        for record in group:
            contextual = contextual_name(record, classifier)
            if contextual is None:
                unqualified.append(record)
                renamed.append(record)
                continue
            new_record = replace(record, name=contextual)
            if new_record.name != record.name:
                observer.on_conflict_resolved(record.name, new_record)
            renamed.append(new_record)

        if len({r.values_key for r in unqualified}) > 1:
            observer.on_unresolved_conflict(name, unqualified)

        resolved.extend(renamed)

    return _separate_remaining_collisions(resolved, observer)


def contextual_name(record: EnumRecord, classifier: PathClassifier) -> str | None:
    """
    Qualified name for a colliding record, or None if its path has no context.

    With a trailing field the field is qualified ("query" + "Type"), otherwise
    the current name is ("request" + "OrderStatus").
    """
    context = classifier.classify(record.original_path)
    if context is None:
        return None

    field = extract_field_name(record.original_path)
    if field:
        return f"{context}{capitalize_first(field)}"

    return f"{context}{capitalize_first(record.name)}"


def _separate_remaining_collisions(
    records: list[EnumRecord], observer: PipelineObserver
) -> list[EnumRecord]:
    """
    Fall back to full-path names wherever two names still collide.

    Checked across all records, so a context rename that lands on a name
    already taken elsewhere is separated as well. Repeats until no fallback
    changes a name; each record can only be renamed once since its full-path
    name is fixed. Collisions between identical value sets are left alone;
    the merge pass folds them into one record anyway.
    """
    separated = list(records)

    while True:
        colliding = _colliding_names(separated)
        changed = False
        for index, record in enumerate(separated):
            if record.name not in colliding:
                continue
            fallback = full_path_name(record)
            if fallback == record.name:
                continue
            new_record = replace(record, name=fallback)
            observer.on_conflict_resolved(record.name, new_record)
            separated[index] = new_record
            changed = True
        if not changed:
            return separated


def _colliding_names(records: Sequence[EnumRecord]) -> set[str]:
    by_name: dict[str, set[str]] = defaultdict(set)
    for record in records:
        by_name[record.name].add(record.values_key)
    return {name for name, keys in by_name.items() if len(keys) > 1}


def merge_identical_enums(
    records: Sequence[EnumRecord],
    observer: PipelineObserver | None = None,
) -> list[EnumRecord]:
    """
    Collapse records whose sorted values are identical into one survivor.

    Survivors are keyed by "name:sortedValues", so two unrelated value sets
    that happen to share a name both survive.
    """
    observer = observer if observer is not None else NoOpPipelineObserver()

    value_groups: dict[str, list[EnumRecord]] = defaultdict(list)
    for record in records:
        value_groups[record.values_key].append(record)

    survivors: dict[str, EnumRecord] = {}
    for values_key, group in value_groups.items():
        if len(group) == 1:
            best = group[0]
        else:
            best = choose_best_for_merging(group)
            observer.on_merged(best, group)
        survivors[f"{best.name}:{values_key}"] = best

    return list(survivors.values())


def choose_best_for_merging(records: Sequence[EnumRecord]) -> EnumRecord:
    """Highest-scoring record; the earliest one wins ties."""
    return max(records, key=lambda r: score_merge_candidate(r.name))


def score_merge_candidate(name: str) -> int:
    """
    Score a name as the representative of a merge group.

    Score = 50 - len(name), minus 20 if it contains a generic term (data,
    response, request, query, body, params), plus 10 if it contains a context
    term (request, response, query). Both adjustments can apply at once.
    """
    lower_name = name.lower()
    score = MERGE_BASE_SCORE - len(name)

    if any(term in lower_name for term in MERGE_GENERIC_TERMS):
        score -= MERGE_GENERIC_PENALTY

    if any(term in lower_name for term in MERGE_CONTEXT_TERMS):
        score += MERGE_CONTEXT_BONUS

    return score
