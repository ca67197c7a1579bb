from collections.abc import Sequence

from core.models import EnumRecord
from ui.observer import NoOpPipelineObserver, PipelineObserver


def filter_enums(
    records: Sequence[EnumRecord],
    include_patterns: Sequence[str] | None = None,
    exclude_patterns: Sequence[str] | None = None,
    observer: PipelineObserver | None = None,
) -> list[EnumRecord]:
    """
    Apply the include and exclude name filters, in that order.

    Matching is a plain substring test against each record's final name.
    A missing or empty pattern list disables its stage.

    Args:
        records: Deduplicated records.
        include_patterns: Keep only records whose name contains at least one pattern.
        exclude_patterns: Drop records whose name contains any pattern.
        observer: Receives the kept/total counts of every stage that ran.

    Returns:
        The records that passed both stages, in input order.
    """
    observer = observer if observer is not None else NoOpPipelineObserver()
    kept = list(records)

    if include_patterns:
        total = len(kept)
        kept = [r for r in kept if any(p in r.name for p in include_patterns)]
        observer.on_filtered("include", len(kept), total)

    if exclude_patterns:
        total = len(kept)
        kept = [r for r in kept if not any(p in r.name for p in exclude_patterns)]
        observer.on_filtered("exclude", len(kept), total)

    return kept
