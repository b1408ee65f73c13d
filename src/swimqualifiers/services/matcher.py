"""Classify meet results against the standards index."""

from swimqualifiers.models.meet_result import MeetResult
from swimqualifiers.models.qualifier import MatchOutcome, QualificationStatus
from swimqualifiers.services.event_normalizer import normalize_event
from swimqualifiers.services.standards_index import StandardsIndex


def classify(result: MeetResult, index: StandardsIndex) -> MatchOutcome:
    """Decide whether a result meets its applicable standard.

    The time comparison is ``MeetResult.meets_standard``: a plain ``<=`` on
    seconds, with no rounding.
    Invalid results and results without an applicable standard are
    UNMATCHED.
    """
    event = normalize_event(result.event)

    if not result.is_valid:
        return MatchOutcome(status=QualificationStatus.UNMATCHED, event=event, invalid=True)

    standard = index.lookup(result.sex, event, result.age)
    if standard is None:
        return MatchOutcome(status=QualificationStatus.UNMATCHED, event=event)

    if result.meets_standard(standard.qualifying_time):
        status = QualificationStatus.QUALIFYING
    else:
        status = QualificationStatus.NOT_QUALIFYING
    return MatchOutcome(status=status, event=event, standard=standard)
