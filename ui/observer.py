"""
Diagnostic reporting protocol for decoupling terminal output from the pipeline.

This module defines a protocol that the extraction, deduplication and filtering
stages report to at well-defined points, making it possible to keep the core
free of print statements and to swap implementations (Rich terminal output,
silent no-op for tests and library use).
"""

from collections.abc import Sequence
from enum import StrEnum
from typing import Protocol

from rich import print as pr

from core.models import EnumRecord
from utils import debug


class ReportStyle(StrEnum):
    """
    Colors used for the different kinds of report lines.

    Attributes:
        STAGE: Magenta, for stage summaries.
        SUCCESS: Green, for the final summary.
        WARNING: Yellow, for conditions that may produce surprising output.
    """

    STAGE = "magenta"
    SUCCESS = "green"
    WARNING = "yellow"


class PipelineObserver(Protocol):
    """
    Protocol for pipeline diagnostics.

    The call order within one run is:
    1. on_extracted() - once, after extraction and naming
    2. on_conflict_resolved() / on_unresolved_conflict() - during name-collision resolution
    3. on_merged() - once per group of identical value sets
    4. on_filtered() - once per include/exclude stage that actually ran
    5. on_generated() - once, when the output is ready
    """

    def on_extracted(self, records: Sequence[EnumRecord]) -> None:
        """
        Report the named records produced by the extractor.

        Args:
            records: All records, before deduplication.
        """

    def on_conflict_resolved(self, old_name: str, record: EnumRecord) -> None:
        """
        Report a rename performed to separate colliding names.

        Args:
            old_name: The name the record had before.
            record: The record carrying its new name.
        """

    def on_unresolved_conflict(
        self, name: str, records: Sequence[EnumRecord]
    ) -> None:
        """
        Report colliding records for which no context qualifier was found.

        Args:
            name: The shared name.
            records: The records that kept it.
        """

    def on_merged(self, survivor: EnumRecord, group: Sequence[EnumRecord]) -> None:
        """
        Report the collapse of identical value sets into a single record.

        Args:
            survivor: The record chosen to represent the group.
            group: Every record of the group, survivor included.
        """

    def on_filtered(self, stage: str, kept: int, total: int) -> None:
        """
        Report the effect of one filter stage.

        Args:
            stage: "include" or "exclude".
            kept: Records left after the stage.
            total: Records entering the stage.
        """

    def on_generated(
        self, records: Sequence[EnumRecord], output_path: str | None
    ) -> None:
        """
        Report the final set of emitted records.

        Args:
            records: The emitted records.
            output_path: Where the output was written, or None if it was not written.
        """


class RichPipelineObserver:
    """
    Rich terminal implementation of PipelineObserver.

    Summary lines (merges, unresolved conflicts, final count) are always printed.
    Per-record detail is printed only when `debug` is enabled.
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug

    def on_extracted(self, records: Sequence[EnumRecord]) -> None:
        if not self.debug:
            return
        debug(f"Found {len(records)} enum types before filtering:")
        for index, record in enumerate(records, start=1):
            debug(
                f"  {index}. {record.name} ({len(record.values)} values) - {record.original_path}"
            )

    def on_conflict_resolved(self, old_name: str, record: EnumRecord) -> None:
        if self.debug:
            debug(f"Renamed {old_name} -> {record.name} ({record.original_path})")

    def on_unresolved_conflict(
        self, name: str, records: Sequence[EnumRecord]
    ) -> None:
        paths = ", ".join(r.original_path for r in records)
        pr(
            f"[{ReportStyle.WARNING}]⚠ Warning:[/{ReportStyle.WARNING}] "
            f"no context found to disambiguate '{name}' ({paths})"
        )

    def on_merged(self, survivor: EnumRecord, group: Sequence[EnumRecord]) -> None:
        pr(
            f"[{ReportStyle.STAGE}]Merged {len(group)} duplicate enum arrays "
            f"into {survivor.name}[/{ReportStyle.STAGE}]"
        )

    def on_filtered(self, stage: str, kept: int, total: int) -> None:
        if self.debug:
            debug(f"After {stage} patterns: {kept}/{total} enums")

    def on_generated(
        self, records: Sequence[EnumRecord], output_path: str | None
    ) -> None:
        location = f" at {output_path}" if output_path else ""
        pr(
            f"[{ReportStyle.SUCCESS}]✅ Generated {len(records)} enum arrays"
            f"{location}[/{ReportStyle.SUCCESS}]"
        )
        if not self.debug:
            return
        debug("Generated enum names:")
        for record in records:
            values = ", ".join(f"'{v}'" for v in record.sorted_values)
            debug(f"  - {record.name} = [{values}] as const")


class NoOpPipelineObserver:
    """
    No-op implementation of PipelineObserver.

    Used by default when the pipeline is called as a library and in tests.
    """

    def on_extracted(self, records: Sequence[EnumRecord]) -> None:
        """No-op: does nothing."""

    def on_conflict_resolved(self, old_name: str, record: EnumRecord) -> None:
        """No-op: does nothing."""

    def on_unresolved_conflict(
        self, name: str, records: Sequence[EnumRecord]
    ) -> None:
        """No-op: does nothing."""

    def on_merged(self, survivor: EnumRecord, group: Sequence[EnumRecord]) -> None:
        """No-op: does nothing."""

    def on_filtered(self, stage: str, kept: int, total: int) -> None:
        """No-op: does nothing."""

    def on_generated(
        self, records: Sequence[EnumRecord], output_path: str | None
    ) -> None:
        """No-op: does nothing."""
