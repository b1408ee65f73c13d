"""Run the qualifier count over a batch of results."""

from collections.abc import Iterable

from swimqualifiers.logging import get_logger
from swimqualifiers.models.meet_result import MeetResult
from swimqualifiers.models.qualifier import QualifierReport
from swimqualifiers.models.time_standard import TimeStandard
from swimqualifiers.services.aggregator import QualifierAggregator
from swimqualifiers.services.matcher import classify
from swimqualifiers.services.standards_index import StandardsIndex

logger = get_logger(__name__)


def count_qualifiers(
    results: Iterable[MeetResult],
    standards: StandardsIndex | Iterable[TimeStandard],
) -> QualifierReport:
    """Classify every result and count qualifiers per (sex, age group, event).

    Args:
        results: Meet results to classify
        standards: A built index, or the standards to build one from

    Returns:
        The finalized qualifier report

    Raises:
        EmptyStandardsError: If no valid standards were supplied
    """
    index = standards if isinstance(standards, StandardsIndex) else StandardsIndex.build(standards)

    aggregator = QualifierAggregator()
    aggregator.add_all((result, classify(result, index)) for result in results)
    report = aggregator.finalize()

    diagnostics = report.diagnostics
    logger.info(
        "qualifiers_counted",
        total_results=diagnostics.total_results,
        qualifying=diagnostics.qualifying,
        not_qualifying=diagnostics.not_qualifying,
        unmatched=diagnostics.unmatched,
        invalid=diagnostics.invalid,
        entries=diagnostics.entry_count,
    )
    return report
