"""Meet result model for recorded race times."""

from pydantic import BaseModel, ConfigDict, computed_field

from swimqualifiers.models.swimmer import Sex
from swimqualifiers.models.time_standard import format_seconds


class MeetResult(BaseModel):
    """One swim recorded at a meet.

    Values are taken as the loader supplies them. Records with a
    non-positive age or time, or a blank event, are reported by
    ``is_valid`` and never qualify.
    """

    model_config = ConfigDict(frozen=True)

    sex: Sex
    age: int  # Age at the time of the swim
    event: str  # Raw event label from the meet file
    time: float  # Seconds

    name: str = ""
    course: str | None = None  # e.g. "LCM", "SCM"

    @computed_field
    @property
    def time_formatted(self) -> str:
        """Format time as M:SS.cc or SS.cc."""
        return format_seconds(self.time)

    @property
    def is_valid(self) -> bool:
        """Check that the result can be classified."""
        return self.age > 0 and self.time > 0 and bool(self.event.strip())

    def meets_standard(self, qualifying_time: float) -> bool:
        """Check if this time meets or beats a qualifying time."""
        return self.is_valid and self.time <= qualifying_time
