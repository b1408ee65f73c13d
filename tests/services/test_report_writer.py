"""Tests for writing the qualifier workbook."""

import pytest
from openpyxl import load_workbook

from swimqualifiers.services.import_service import ImportService
from swimqualifiers.services.pipeline import count_qualifiers
from swimqualifiers.services.report_writer import write_qualifier_report
from swimqualifiers.services.standards_index import StandardsIndex


@pytest.fixture
def written(tmp_path, standards_workbook, meet_folder):
    """Run the full pipeline over the fixture workbooks and load the output."""
    service = ImportService()
    standards, _ = service.load_time_standards(standards_workbook)
    results, _ = service.load_meet_results(meet_folder)
    index = StandardsIndex.build(standards)
    report = count_qualifiers(results, index)

    path = write_qualifier_report(report, index, tmp_path / "out" / "qualifier_counts.xlsx")
    return load_workbook(path)


def sheet_rows(workbook, title: str) -> list[tuple]:
    return list(workbook[title].iter_rows(values_only=True))


class TestWriteQualifierReport:
    """Tests for write_qualifier_report."""

    def test_sheets(self, written):
        assert written.sheetnames == ["Mens", "Womens", "Qualifiers"]

    def test_mens_grid(self, written):
        rows = sheet_rows(written, "Mens")

        assert rows[0] == ("Event", "13 & Under", "14-15", "16 & Over")
        assert rows[1] == ("100Fly", 1, 0, 0)
        assert rows[2] == ("200IM", 0, 0, 0)
        assert rows[3] == ("50Free", 1, 0, 0)

    def test_unique_totals(self, written):
        rows = {row[0]: row[1:] for row in sheet_rows(written, "Mens") if row[0]}

        assert rows["Total Unique Athletes"] == (2, 0, 0)
        assert rows["Unique Qualifiers"] == (1, 0, 0)

    def test_womens_grid(self, written):
        rows = sheet_rows(written, "Womens")

        assert rows[0] == ("Event", "12", "13", "14")
        assert rows[1] == ("100Fly", 0, 0, 1)

    def test_rows_sheet(self, written):
        rows = sheet_rows(written, "Qualifiers")

        assert rows[0] == ("Sex", "Age Group", "Event", "Count")
        assert rows[1:] == [
            ("Men", "13 & Under", "100Fly", 1),
            ("Men", "13 & Under", "50Free", 1),
            ("Women", "14", "100Fly", 1),
        ]
