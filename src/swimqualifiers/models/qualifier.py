"""Classification outcomes and the aggregated qualifier report."""

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from swimqualifiers.models.swimmer import Sex
from swimqualifiers.models.time_standard import TimeStandard

# (sex, age group label, canonical event)
CountKey = tuple[Sex, str, str]
# (sex, age group label)
AgeGroupKey = tuple[Sex, str]


class QualificationStatus(StrEnum):
    """Outcome of comparing one result against the standards."""

    QUALIFYING = "qualifying"
    NOT_QUALIFYING = "not_qualifying"
    UNMATCHED = "unmatched"  # No standard for the sex, age and event


class MatchOutcome(BaseModel):
    """Classification of a single meet result."""

    model_config = ConfigDict(frozen=True)

    status: QualificationStatus
    event: str  # Canonical event label
    standard: TimeStandard | None = None
    invalid: bool = False  # Result was rejected before lookup

    @property
    def age_group_label(self) -> str | None:
        """Label of the matched standard's age group, as published."""
        return self.standard.age_group.label if self.standard else None

    @property
    def is_qualifying(self) -> bool:
        return self.status == QualificationStatus.QUALIFYING


class RunDiagnostics(BaseModel):
    """Run-level totals reported alongside the qualifier counts."""

    model_config = ConfigDict(frozen=True)

    total_results: int = 0
    qualifying: int = 0
    not_qualifying: int = 0
    unmatched: int = 0
    invalid: int = 0  # Unmatched because the record itself was invalid
    distinct_ages: list[int] = []
    distinct_events: list[str] = []
    entry_count: int = 0


class QualifierReport(BaseModel):
    """Final qualifier counts for a run.

    ``counts`` only holds keys with at least one qualifying result.
    """

    model_config = ConfigDict(frozen=True)

    counts: dict[CountKey, int] = {}
    unique_athletes: dict[AgeGroupKey, int] = {}
    unique_qualifiers: dict[AgeGroupKey, int] = {}
    diagnostics: RunDiagnostics = RunDiagnostics()

    def count_for(self, sex: Sex, age_group_label: str, event: str) -> int:
        """Qualifier count for one key, zero when nothing qualified."""
        return self.counts.get((sex, age_group_label, event), 0)

    def rows(self) -> Iterator[tuple[Sex, str, str, int]]:
        """Yield (sex, age_group_label, event, count) rows in key order."""
        for (sex, label, event), count in sorted(self.counts.items()):
            yield sex, label, event, count

    @property
    def total_qualifiers(self) -> int:
        return sum(self.counts.values())
