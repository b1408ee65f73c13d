"""Pydantic models for swim qualifier counting."""

from swimqualifiers.models.age_group import AgeGroup, AgeGroupKind
from swimqualifiers.models.meet_result import MeetResult
from swimqualifiers.models.qualifier import (
    AgeGroupKey,
    CountKey,
    MatchOutcome,
    QualificationStatus,
    QualifierReport,
    RunDiagnostics,
)
from swimqualifiers.models.swimmer import Sex
from swimqualifiers.models.time_standard import TimeStandard, format_seconds

__all__ = [
    # Age group
    "AgeGroup",
    "AgeGroupKind",
    # Meet result
    "MeetResult",
    # Qualifier
    "AgeGroupKey",
    "CountKey",
    "MatchOutcome",
    "QualificationStatus",
    "QualifierReport",
    "RunDiagnostics",
    # Swimmer
    "Sex",
    # Time standard
    "TimeStandard",
    "format_seconds",
]
