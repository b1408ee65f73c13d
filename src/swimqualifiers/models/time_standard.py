"""Time standard models for qualifying times."""

import math

from pydantic import BaseModel, ConfigDict, computed_field

from swimqualifiers.models.age_group import AgeGroup
from swimqualifiers.models.swimmer import Sex


class TimeStandard(BaseModel):
    """A qualifying time for one sex, age group and event.

    Examples:
    - Men 13 & Under 100 Fly: 1:15.00
    - Women 14-15 200 IM: 2:31.40
    """

    model_config = ConfigDict(frozen=True)

    sex: Sex
    age_group: AgeGroup
    event: str  # Event label as published, normalized by the standards index
    qualifying_time: float  # Seconds; a result at or under this time qualifies

    @computed_field
    @property
    def time_formatted(self) -> str:
        """Format time as M:SS.cc or SS.cc."""
        return format_seconds(self.qualifying_time)

    @property
    def is_valid(self) -> bool:
        """Check that the standard can take part in matching."""
        return self.qualifying_time > 0 and bool(self.event.strip())

    def __str__(self) -> str:
        return f"{self.sex.value} {self.age_group.label} {self.event}: {self.time_formatted}"


def format_seconds(seconds: float) -> str:
    """Format seconds as a time string (M:SS.cc or SS.cc).

    Examples:
        56.29 -> "56.29"
        65.79 -> "1:05.79"
        -5.0 -> "-5.00"
    """
    if not math.isfinite(seconds):
        return str(seconds)

    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    minutes = int(seconds // 60)
    remainder = seconds - minutes * 60

    if minutes > 0:
        return f"{sign}{minutes}:{remainder:05.2f}"
    return f"{sign}{remainder:.2f}"
