"""Age group brackets as published on qualifying time standards."""

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class AgeGroupKind(StrEnum):
    """How an age group label bounds the ages it covers."""

    EXACT = "exact"  # "12"
    RANGE = "range"  # "14-15"
    UNDER = "under"  # "13 & Under"
    OVER = "over"  # "16 & Over"


# Label patterns, matched against the stripped label
RANGE_PATTERN = re.compile(r"^(\d+)\s*[-–—]\s*(\d+)$")
UNDER_PATTERN = re.compile(r"^(\d+)\s*(?:&\s*U(?:nder)?|and\s+under|U)$", re.IGNORECASE)
OVER_PATTERN = re.compile(r"^(\d+)\s*(?:&\s*O(?:ver)?|and\s+over|O|\+)$", re.IGNORECASE)
EXACT_PATTERN = re.compile(r"^(\d+)(?:\.0+)?$")


class AgeGroup(BaseModel):
    """An age group column of a time standards sheet.

    A single age is a range whose bounds are equal. Open-ended groups leave
    one bound unset: "13 & Under" has no min_age, "16 & Over" no max_age.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    kind: AgeGroupKind
    min_age: int | None = None
    max_age: int | None = None

    @model_validator(mode="after")
    def validate_bounds(self) -> "AgeGroup":
        """Check that the bounds agree with the kind of group."""
        if self.kind in (AgeGroupKind.EXACT, AgeGroupKind.RANGE):
            if self.min_age is None or self.max_age is None:
                raise ValueError(f"Age group '{self.label}' needs both bounds")
            if self.min_age > self.max_age:
                raise ValueError(
                    f"Age group '{self.label}' has min age {self.min_age} above max age {self.max_age}"
                )
        elif self.kind == AgeGroupKind.UNDER and (self.min_age is not None or self.max_age is None):
            raise ValueError(f"Age group '{self.label}' must only set max_age")
        elif self.kind == AgeGroupKind.OVER and (self.max_age is not None or self.min_age is None):
            raise ValueError(f"Age group '{self.label}' must only set min_age")
        return self

    @classmethod
    def parse(cls, label: str) -> "AgeGroup":
        """Parse a published age group label.

        Supports formats:
        - "12", "12.0" (single age)
        - "14-15", "14 - 15" (inclusive range)
        - "13 & Under", "13&U", "13U", "13 and under"
        - "16 & Over", "16&O", "16 and over", "16+"

        Raises:
            ValueError: If the label matches none of the formats
        """
        text = label.strip()

        match = EXACT_PATTERN.match(text)
        if match:
            age = int(match.group(1))
            return cls(label=text, kind=AgeGroupKind.EXACT, min_age=age, max_age=age)

        match = RANGE_PATTERN.match(text)
        if match:
            return cls(
                label=text,
                kind=AgeGroupKind.RANGE,
                min_age=int(match.group(1)),
                max_age=int(match.group(2)),
            )

        match = UNDER_PATTERN.match(text)
        if match:
            return cls(label=text, kind=AgeGroupKind.UNDER, max_age=int(match.group(1)))

        match = OVER_PATTERN.match(text)
        if match:
            return cls(label=text, kind=AgeGroupKind.OVER, min_age=int(match.group(1)))

        raise ValueError(
            f"Invalid age group: '{label}'. "
            "Expected '12', '14-15', '13 & Under' or '16 & Over'"
        )

    @property
    def nominal_min(self) -> int:
        """Lowest age named by the label (the max age for "& Under" groups)."""
        return self.min_age if self.min_age is not None else self.max_age  # type: ignore[return-value]

    @property
    def nominal_max(self) -> int:
        """Highest age named by the label (the min age for "& Over" groups)."""
        return self.max_age if self.max_age is not None else self.min_age  # type: ignore[return-value]

    @property
    def sort_key(self) -> tuple[int, int, int]:
        """Order groups youngest first; open-below groups sort before all others."""
        lower = -1 if self.kind == AgeGroupKind.UNDER else self.nominal_min
        upper_open = 1 if self.kind == AgeGroupKind.OVER else 0
        return (lower, upper_open, self.nominal_max)

    def __str__(self) -> str:
        return self.label
