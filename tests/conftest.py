"""Shared fixtures for swimqualifiers tests."""

from pathlib import Path

import pytest
from openpyxl import Workbook

from swimqualifiers.models import AgeGroup, MeetResult, Sex, TimeStandard


@pytest.fixture
def make_standard():
    """Build a TimeStandard from plain values."""

    def _make(
        age_group: str = "13 & Under",
        event: str = "100Fly",
        qualifying_time: float = 75.0,
        sex: Sex = Sex.MEN,
    ) -> TimeStandard:
        return TimeStandard(
            sex=sex,
            age_group=AgeGroup.parse(age_group),
            event=event,
            qualifying_time=qualifying_time,
        )

    return _make


@pytest.fixture
def make_result():
    """Build a MeetResult from plain values."""

    def _make(
        age: int = 12,
        event: str = "100Fly",
        time: float = 70.0,
        sex: Sex = Sex.MEN,
        name: str = "",
    ) -> MeetResult:
        return MeetResult(sex=sex, age=age, event=event, time=time, name=name)

    return _make


@pytest.fixture
def scenario_standards(make_standard) -> list[TimeStandard]:
    """Men's 100 Fly standards for 13 & Under and 14-15."""
    return [
        make_standard("13 & Under", "100Fly", 75.00),
        make_standard("14-15", "100Fly", 68.00),
    ]


@pytest.fixture
def scenario_results(make_result) -> list[MeetResult]:
    """One qualifying, one slower and one unmatched men's 100 Fly swim."""
    return [
        make_result(age=12, event="100Bu", time=73.37),
        make_result(age=14, event="100Fly", time=70.00),
        make_result(age=16, event="100Fly", time=60.00),
    ]


@pytest.fixture
def write_workbook(tmp_path: Path):
    """Write a workbook of {sheet title: rows} to tmp_path and return its path."""

    def _write(file_name: str, sheets: dict[str, list[list[object]]]) -> Path:
        workbook = Workbook()
        workbook.remove(workbook.active)
        for title, rows in sheets.items():
            sheet = workbook.create_sheet(title)
            for row in rows:
                sheet.append(row)
        path = tmp_path / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
        return path

    return _write


def meet_row(name: str | None, time: object) -> list[object]:
    """A meet export row with the name in column E and time in column J."""
    return [1, None, None, None, name, None, None, None, None, time]


@pytest.fixture
def standards_workbook(write_workbook) -> Path:
    """Standards workbook with Mens and Womens tabs."""
    return write_workbook(
        "timestandards.xlsx",
        {
            "Mens": [
                ["Event", "13 & Under", "14-15", "16 & Over"],
                ["100 Bu", "1:15.00", 68.0, 60.5],
                ["200 ME", "2:45.10", "2:30.00", None],
                ["50 Free", 30.0, 27.5, 25.0],
            ],
            "Womens": [
                ["Event", "12", "13", "14"],
                ["100 Bu", "1:18.00", "1:14.00", "1:11.00"],
            ],
        },
    )


@pytest.fixture
def meet_folder(tmp_path: Path, write_workbook) -> Path:
    """Data folder with two meet files and one unrelated workbook."""
    write_workbook(
        "data/CAN-MBSK_Provincials_LCM_Men_00-12.xlsx",
        {
            "100 Bu": [
                meet_row("Name", "Time"),
                meet_row("Alex Fast", 73.37),
                meet_row("Sam Slow", "1:20.00"),
                meet_row(None, "DQ"),
            ],
            "50 Free": [
                meet_row("Alex Fast", "29.90"),
            ],
        },
    )
    write_workbook(
        "data/CAN-MBSK_Provincials_LCM_Women_13-14.xlsx",
        {
            "100 Fly": [
                meet_row("Jo Quick", "1:10.50"),
                meet_row("Kim Steady", 72.0),
            ],
        },
    )
    write_workbook("data/summary.xlsx", {"Sheet": [["not", "a", "meet"]]})
    return tmp_path / "data"
