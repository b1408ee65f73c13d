"""Resolve a swimmer's age to the age group of a standards sheet.

Standards sheets publish brackets ("13 & Under", "14-15", "16 & Over") or
just a column per age ("10", "11", ... "18"). There is no separate bracket
configuration, so the open ends are inferred from the groups present for a
sex and event:

- The youngest group covers every younger age. An explicit "& Under" group
  always does; a bare single age at the bottom is treated as "& Under".
- The oldest group covers every older age. An explicit "& Over" group
  always does; a bare single age at the top is treated as "& Over".
- Explicit ranges ("14-15") keep their declared bounds, even at either end.
- Every other group covers exactly its declared age or range.
- A lone single-age group is both youngest and oldest and covers all ages.

When malformed standards let an age fall into two groups, the younger
group wins.
"""

import math
from collections.abc import Iterable, Sequence

from swimqualifiers.models.age_group import AgeGroup, AgeGroupKind

# Effective inclusive bounds; math.inf marks an open end
Bracket = tuple[AgeGroup, float, float]


def bracket_bounds(groups: Iterable[AgeGroup]) -> list[Bracket]:
    """Apply the open-ended bracket policy to a set of age groups.

    Args:
        groups: Age groups published for one sex and event (duplicates allowed)

    Returns:
        (group, lowest age, highest age) for each distinct group, youngest
        first. Open ends are -inf / inf.
    """
    ordered = sorted(set(groups), key=lambda g: (g.sort_key, g.label))
    if not ordered:
        return []

    youngest = ordered[0]
    oldest = max(ordered, key=_upper_key)

    brackets: list[Bracket] = []
    for group in ordered:
        low: float = group.nominal_min
        high: float = group.nominal_max

        if group.kind == AgeGroupKind.UNDER or (
            group is youngest and group.kind == AgeGroupKind.EXACT
        ):
            low = -math.inf
        if group.kind == AgeGroupKind.OVER or (
            group is oldest and group.kind == AgeGroupKind.EXACT
        ):
            high = math.inf

        brackets.append((group, low, high))
    return brackets


def resolve_age_group(age: int, groups: Iterable[AgeGroup]) -> AgeGroup | None:
    """Find the age group that covers an age.

    Args:
        age: Swimmer's age at the time of the swim
        groups: Age groups published for one sex and event

    Returns:
        The matching group as published, or None when there are no groups,
        the age is not positive, or no group covers it
    """
    if age <= 0:
        return None
    return resolve_in_brackets(age, bracket_bounds(groups))


def resolve_in_brackets(age: int, brackets: Sequence[Bracket]) -> AgeGroup | None:
    """Resolve an age against brackets already built by ``bracket_bounds``."""
    if age <= 0:
        return None
    for group, low, high in brackets:
        if low <= age <= high:
            return group
    return None


def _upper_key(group: AgeGroup) -> tuple[float, int]:
    upper = math.inf if group.kind == AgeGroupKind.OVER else group.nominal_max
    # Latest in sort order wins ties, so the youngest and oldest differ when possible
    return (upper, group.sort_key[0])
