"""Lookup of qualifying time standards by sex, event and age."""

from collections.abc import Iterable
from types import MappingProxyType

from swimqualifiers.exceptions import EmptyStandardsError
from swimqualifiers.logging import get_logger
from swimqualifiers.models.age_group import AgeGroup
from swimqualifiers.models.swimmer import Sex
from swimqualifiers.models.time_standard import TimeStandard
from swimqualifiers.services.age_groups import Bracket, bracket_bounds, resolve_in_brackets
from swimqualifiers.services.event_normalizer import normalize_event

logger = get_logger(__name__)

IndexKey = tuple[Sex, str]


class StandardsIndex:
    """Read-only index of time standards keyed by (sex, canonical event).

    Build once with ``StandardsIndex.build`` before classifying results.
    Standards for each key are kept youngest age group first.
    """

    def __init__(
        self,
        entries: dict[IndexKey, tuple[TimeStandard, ...]],
        event_order: dict[Sex, tuple[str, ...]],
    ):
        self._entries = MappingProxyType(entries)
        self._event_order = MappingProxyType(event_order)
        self._brackets: MappingProxyType[IndexKey, tuple[Bracket, ...]] = MappingProxyType(
            {
                key: tuple(bracket_bounds(s.age_group for s in standards))
                for key, standards in entries.items()
            }
        )
        self._by_group: MappingProxyType[tuple[Sex, str, AgeGroup], TimeStandard] = (
            MappingProxyType(
                {
                    (key[0], key[1], s.age_group): s
                    for key, standards in entries.items()
                    for s in standards
                }
            )
        )

    @classmethod
    def build(cls, standards: Iterable[TimeStandard]) -> "StandardsIndex":
        """Index standards under their canonical event labels.

        Invalid standards (non-positive time, blank event) are skipped, and
        for duplicate (sex, event, age group) entries the first one is kept.

        Raises:
            EmptyStandardsError: If no valid standard remains
        """
        grouped: dict[IndexKey, dict[AgeGroup, TimeStandard]] = {}
        event_order: dict[Sex, list[str]] = {}
        skipped = 0

        for standard in standards:
            if not standard.is_valid:
                skipped += 1
                logger.warning(
                    "invalid_standard_skipped",
                    sex=standard.sex.value,
                    event_label=standard.event,
                    age_group=standard.age_group.label,
                    qualifying_time=standard.qualifying_time,
                )
                continue

            event = normalize_event(standard.event)
            if event != standard.event:
                standard = standard.model_copy(update={"event": event})

            key = (standard.sex, event)
            by_group = grouped.setdefault(key, {})
            if standard.age_group in by_group:
                logger.warning(
                    "duplicate_standard_ignored",
                    sex=standard.sex.value,
                    event_label=event,
                    age_group=standard.age_group.label,
                    kept=by_group[standard.age_group].time_formatted,
                    ignored=standard.time_formatted,
                )
                continue
            by_group[standard.age_group] = standard

            events = event_order.setdefault(standard.sex, [])
            if event not in events:
                events.append(event)

        if not grouped:
            raise EmptyStandardsError("No valid time standards were loaded")

        entries = {
            key: tuple(sorted(by_group.values(), key=_age_group_order))
            for key, by_group in grouped.items()
        }
        index = cls(entries, {sex: tuple(events) for sex, events in event_order.items()})
        logger.info(
            "standards_indexed",
            standards=len(index),
            keys=len(entries),
            skipped=skipped,
        )
        return index

    def lookup(self, sex: Sex, event: str, age: int) -> TimeStandard | None:
        """Find the standard that applies to a swim.

        Args:
            sex: Sex of the swimmer
            event: Canonical event label
            age: Swimmer's age at the time of the swim

        Returns:
            The applicable standard, or None when the sex/event has no
            standards or no age group covers the age
        """
        brackets = self._brackets.get((sex, event))
        if not brackets:
            return None

        group = resolve_in_brackets(age, brackets)
        if group is None:
            return None
        return self._by_group[(sex, event, group)]

    def standards_for(self, sex: Sex, event: str) -> tuple[TimeStandard, ...]:
        """All standards for a sex and canonical event, youngest group first."""
        return self._entries.get((sex, event), ())

    def events_for(self, sex: Sex) -> tuple[str, ...]:
        """Canonical events for a sex in the order the standards listed them."""
        return self._event_order.get(sex, ())

    def age_groups_for(self, sex: Sex) -> list[AgeGroup]:
        """Distinct age groups used by a sex's standards, youngest first."""
        groups: set[AgeGroup] = set()
        for (key_sex, _), standards in self._entries.items():
            if key_sex == sex:
                groups.update(s.age_group for s in standards)
        return sorted(groups, key=lambda g: (g.sort_key, g.label))

    @property
    def sexes(self) -> list[Sex]:
        return [sex for sex in Sex if sex in self._event_order]

    def __len__(self) -> int:
        return sum(len(standards) for standards in self._entries.values())

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def _age_group_order(standard: TimeStandard) -> tuple[tuple[int, int, int], str]:
    return (standard.age_group.sort_key, standard.age_group.label)
