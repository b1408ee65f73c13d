"""Fold classification outcomes into qualifier counts."""

from collections import Counter
from collections.abc import Iterable

from swimqualifiers.exceptions import AggregationClosedError
from swimqualifiers.models.meet_result import MeetResult
from swimqualifiers.models.qualifier import (
    AgeGroupKey,
    CountKey,
    MatchOutcome,
    QualificationStatus,
    QualifierReport,
    RunDiagnostics,
)


class QualifierAggregator:
    """Tally qualifying results per (sex, age group, event).

    Counts are only readable from the report returned by ``finalize``.
    Outcomes may be added in any order; the final report is the same.
    """

    def __init__(self) -> None:
        self._counts: Counter[CountKey] = Counter()
        self._status_totals: Counter[QualificationStatus] = Counter()
        self._invalid = 0
        self._ages: set[int] = set()
        self._events: set[str] = set()
        self._athletes: dict[AgeGroupKey, set[str]] = {}
        self._qualified_athletes: dict[AgeGroupKey, set[str]] = {}
        self._report: QualifierReport | None = None

    def add(self, result: MeetResult, outcome: MatchOutcome) -> None:
        """Record one classified result.

        Raises:
            AggregationClosedError: If the aggregator was already finalized
        """
        if self._report is not None:
            raise AggregationClosedError("Cannot add outcomes after finalize()")

        self._status_totals[outcome.status] += 1
        self._ages.add(result.age)
        self._events.add(outcome.event)
        if outcome.invalid:
            self._invalid += 1

        label = outcome.age_group_label
        if outcome.status == QualificationStatus.UNMATCHED or label is None:
            return

        name = result.name.strip()
        group_key = (result.sex, label)
        if name:
            self._athletes.setdefault(group_key, set()).add(name)

        if outcome.is_qualifying:
            self._counts[(result.sex, label, outcome.event)] += 1
            if name:
                self._qualified_athletes.setdefault(group_key, set()).add(name)

    def add_all(self, pairs: Iterable[tuple[MeetResult, MatchOutcome]]) -> None:
        """Record a sequence of (result, outcome) pairs."""
        for result, outcome in pairs:
            self.add(result, outcome)

    def finalize(self) -> QualifierReport:
        """Freeze the tallies into a report. Later calls return the same report."""
        if self._report is None:
            totals = self._status_totals
            diagnostics = RunDiagnostics(
                total_results=totals.total(),
                qualifying=totals[QualificationStatus.QUALIFYING],
                not_qualifying=totals[QualificationStatus.NOT_QUALIFYING],
                unmatched=totals[QualificationStatus.UNMATCHED],
                invalid=self._invalid,
                distinct_ages=sorted(self._ages),
                distinct_events=sorted(self._events),
                entry_count=len(self._counts),
            )
            self._report = QualifierReport(
                counts=dict(self._counts),
                unique_athletes={key: len(names) for key, names in self._athletes.items()},
                unique_qualifiers={
                    key: len(names) for key, names in self._qualified_athletes.items()
                },
                diagnostics=diagnostics,
            )
        return self._report
