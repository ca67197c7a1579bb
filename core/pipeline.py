"""
End-to-end enum-array generation over a block of type-definition text.

The pipeline is a pure function of its input: it reads nothing from disk,
writes nothing and prints nothing. Diagnostics go to the observer.

Stages:
1. Extraction of every union-of-literals occurrence with its structural path.
2. Semantic naming of each record.
3. Name-collision resolution and value-identity merging.
4. Include/exclude filtering on the final names.
5. Rendering of the output text.
"""

from collections.abc import Mapping
from typing import Any

from core.classification import PathClassifier
from core.deduplication import deduplicate_enums
from core.emitter import render_enum_arrays
from core.extraction import extract_enums
from core.filtering import filter_enums
from core.models import GenerationResult
from core.naming import name_records
from ui.observer import NoOpPipelineObserver, PipelineObserver


def generate_enum_arrays(
    content: str,
    config: Mapping[str, Any] | None = None,
    observer: PipelineObserver | None = None,
    classifier: PathClassifier | None = None,
) -> GenerationResult:
    """
    Turn type-definition text into constant-array declarations.

    Args:
        content: The full text of the type-definition file.
        config: Filter and prefix settings (`includePatterns`, `excludePatterns`,
            `arrayPrefix`). Other keys are ignored.
        observer: Receives stage diagnostics. Defaults to a no-op.
        classifier: Strategy used to qualify colliding names.

    Returns:
        GenerationResult with the named extraction output, the surviving
        records and the rendered text. `output_path` is left unset.
    """
    config = config or {}
    observer = observer if observer is not None else NoOpPipelineObserver()

    extracted = name_records(extract_enums(content))
    observer.on_extracted(extracted)

    deduplicated = deduplicate_enums(extracted, classifier, observer)
    records = filter_enums(
        deduplicated,
        config.get("includePatterns"),
        config.get("excludePatterns"),
        observer,
    )

    rendered = render_enum_arrays(records, config.get("arrayPrefix") or "")
    return GenerationResult(extracted=extracted, records=records, content=rendered)
