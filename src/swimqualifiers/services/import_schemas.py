"""Pydantic schemas for spreadsheet import operations."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from swimqualifiers.models.swimmer import Sex


class Severity(StrEnum):
    """Import issue severity levels."""

    ERROR = "error"  # The file or row was skipped
    WARNING = "warning"  # A single value was skipped


class ImportIssue(BaseModel):
    """A problem found while reading a workbook."""

    file: str
    sheet: str | None = None
    row_number: int | None = None
    field: str
    message: str
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        location = self.file
        if self.sheet:
            location += f" [{self.sheet}]"
        if self.row_number is not None:
            location += f" row {self.row_number}"
        return f"{location}: {self.field}: {self.message}"


class MeetFileInfo(BaseModel):
    """Metadata encoded in a meet result file name.

    Meet exports are named ``<org>_<meet>_<course>_<sex>_<AA-BB>.xlsx``,
    e.g. ``CAN-MBSK_Provincials_LCM_Men_00-12.xlsx``. The upper value of
    the age range is the age of every swimmer in the file.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    course: str
    sex: Sex
    age: int

    @classmethod
    def from_path(cls, path: Path) -> "MeetFileInfo":
        """Parse course, sex and age from a meet file name.

        Raises:
            ValueError: If the file name does not follow the naming scheme
        """
        parts = path.stem.split("_")
        if len(parts) < 5:
            raise ValueError(
                f"Cannot parse file name: '{path.name}'. "
                "Expected '<org>_<meet>_<course>_<sex>_<AA-BB>.xlsx'"
            )

        age_parts = parts[4].split("-")
        if len(age_parts) != 2 or not age_parts[1].strip().isdigit():
            raise ValueError(f"Invalid age range format: '{parts[4]}'. Expected 'AA-BB'")

        return cls(
            path=path,
            course=parts[2].strip(),
            sex=Sex.parse(parts[3]),
            age=int(age_parts[1]),
        )
