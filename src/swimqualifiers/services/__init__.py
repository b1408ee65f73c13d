"""Service layer for swim qualifier counting."""

from swimqualifiers.services.age_groups import bracket_bounds, resolve_age_group
from swimqualifiers.services.aggregator import QualifierAggregator
from swimqualifiers.services.event_normalizer import EVENT_RULES, normalize_event
from swimqualifiers.services.import_schemas import ImportIssue, MeetFileInfo, Severity
from swimqualifiers.services.import_service import ImportService
from swimqualifiers.services.matcher import classify
from swimqualifiers.services.pipeline import count_qualifiers
from swimqualifiers.services.report_writer import write_qualifier_report
from swimqualifiers.services.standards_index import StandardsIndex
from swimqualifiers.services.time_parser import parse_time_to_seconds

__all__ = [
    "bracket_bounds",
    "classify",
    "count_qualifiers",
    "EVENT_RULES",
    "ImportIssue",
    "ImportService",
    "MeetFileInfo",
    "normalize_event",
    "parse_time_to_seconds",
    "QualifierAggregator",
    "resolve_age_group",
    "Severity",
    "StandardsIndex",
    "write_qualifier_report",
]
