"""Tests for reading standards and meet result workbooks."""

from pathlib import Path

import pytest

from swimqualifiers.exceptions import ImportFileError
from swimqualifiers.models import AgeGroupKind, Sex
from swimqualifiers.services.import_schemas import MeetFileInfo, Severity
from swimqualifiers.services.import_service import ImportService


@pytest.fixture
def service() -> ImportService:
    return ImportService()


class TestLoadTimeStandards:
    """Tests for ImportService.load_time_standards."""

    def test_loads_both_tabs(self, service, standards_workbook):
        standards, issues = service.load_time_standards(standards_workbook)

        assert issues == []
        assert len(standards) == 11
        assert {s.sex for s in standards} == {Sex.MEN, Sex.WOMEN}

    def test_values(self, service, standards_workbook):
        standards, _ = service.load_time_standards(standards_workbook)
        fly = [s for s in standards if s.sex == Sex.MEN and s.event == "100 Bu"]

        assert [s.age_group.label for s in fly] == ["13 & Under", "14-15", "16 & Over"]
        assert [s.qualifying_time for s in fly] == pytest.approx([75.0, 68.0, 60.5])

    def test_single_age_headers(self, service, standards_workbook):
        standards, _ = service.load_time_standards(standards_workbook)
        women = [s for s in standards if s.sex == Sex.WOMEN]

        assert [s.age_group.label for s in women] == ["12", "13", "14"]
        assert all(s.age_group.kind == AgeGroupKind.EXACT for s in women)

    def test_empty_cells_skipped(self, service, standards_workbook):
        standards, _ = service.load_time_standards(standards_workbook)
        im = [s for s in standards if s.event == "200 ME"]
        assert len(im) == 2

    def test_bad_header_and_time_reported(self, service, write_workbook):
        path = write_workbook(
            "standards.xlsx",
            {"Mens": [["Event", "13 & Under", "Open"], ["100 Fly", "abc", 60.0]]},
        )
        standards, issues = service.load_time_standards(path)

        assert standards == []
        assert [issue.field for issue in issues] == ["age_group", "13 & Under"]
        assert issues[0].severity == Severity.ERROR
        assert issues[1].severity == Severity.WARNING
        assert issues[1].row_number == 2

    def test_missing_tabs_reported(self, service, write_workbook):
        path = write_workbook("standards.xlsx", {"Boys": [["Event", "12"]]})
        standards, issues = service.load_time_standards(path)

        assert standards == []
        assert len(issues) == 1
        assert "No Mens/Womens tabs" in issues[0].message

    def test_missing_file(self, service, tmp_path):
        with pytest.raises(ImportFileError, match="not found"):
            service.load_time_standards(tmp_path / "missing.xlsx")

    def test_not_a_workbook(self, service, tmp_path):
        path = tmp_path / "standards.xlsx"
        path.write_text("not a workbook")
        with pytest.raises(ImportFileError, match="Cannot open workbook"):
            service.load_time_standards(path)


class TestMeetFileInfo:
    """Tests for parsing meet file names."""

    def test_parse(self):
        info = MeetFileInfo.from_path(Path("CAN-MBSK_Provincials_LCM_Men_00-12.xlsx"))
        assert info.course == "LCM"
        assert info.sex == Sex.MEN
        assert info.age == 12

    def test_womens(self):
        info = MeetFileInfo.from_path(Path("CAN-MBSK_Winter_SCM_Women_13-14.xlsx"))
        assert info.sex == Sex.WOMEN
        assert info.age == 14

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("CAN-MBSK_Provincials_LCM.xlsx", "Cannot parse file name"),
            ("CAN-MBSK_Provincials_LCM_Men_12.xlsx", "Invalid age range"),
            ("CAN-MBSK_Provincials_LCM_Men_00-XX.xlsx", "Invalid age range"),
            ("CAN-MBSK_Provincials_LCM_Mixed_00-12.xlsx", "Invalid sex"),
        ],
    )
    def test_invalid_names(self, name, message):
        with pytest.raises(ValueError, match=message):
            MeetFileInfo.from_path(Path(name))


class TestMeetResults:
    """Tests for reading meet result workbooks."""

    def test_discover_filters_prefix(self, service, meet_folder):
        names = [path.name for path in service.discover_meet_files(meet_folder)]
        assert names == [
            "CAN-MBSK_Provincials_LCM_Men_00-12.xlsx",
            "CAN-MBSK_Provincials_LCM_Women_13-14.xlsx",
        ]

    def test_custom_prefix(self, meet_folder):
        assert ImportService(meet_file_prefix="XYZ_").discover_meet_files(meet_folder) == []

    def test_parse_meet_file(self, service, meet_folder):
        results, issues = service.parse_meet_file(
            meet_folder / "CAN-MBSK_Provincials_LCM_Men_00-12.xlsx"
        )

        assert issues == []
        assert [(r.event, r.name, r.time) for r in results] == [
            ("100 Bu", "Alex Fast", 73.37),
            ("100 Bu", "Sam Slow", 80.0),
            ("50 Free", "Alex Fast", 29.9),
        ]
        assert all(r.sex == Sex.MEN and r.age == 12 and r.course == "LCM" for r in results)

    def test_load_meet_results(self, service, meet_folder):
        results, issues = service.load_meet_results(meet_folder)
        assert len(results) == 5
        assert issues == []

    def test_unreadable_file_skipped(self, service, meet_folder):
        (meet_folder / "CAN-MBSK_Broken_LCM_Men_00-12.xlsx").write_text("garbage")
        results, issues = service.load_meet_results(meet_folder)

        assert len(results) == 5
        assert [issue.file for issue in issues] == ["CAN-MBSK_Broken_LCM_Men_00-12.xlsx"]

    def test_bad_file_name_reported(self, service, meet_folder, write_workbook):
        write_workbook("data/CAN-MBSK_Unnamed.xlsx", {"100 Fly": [["x"]]})
        _, issues = service.load_meet_results(meet_folder)

        assert len(issues) == 1
        assert issues[0].field == "file_name"

    def test_legacy_xls_reported(self, service, meet_folder):
        (meet_folder / "CAN-MBSK_Old_LCM_Men_00-12.xls").write_text("legacy")
        _, issues = service.load_meet_results(meet_folder)

        assert len(issues) == 1
        assert ".xls" in issues[0].message

    def test_missing_folder(self, service, tmp_path):
        with pytest.raises(ImportFileError, match="Data folder not found"):
            service.load_meet_results(tmp_path / "nowhere")

    def test_no_meet_files(self, service, tmp_path):
        with pytest.raises(ImportFileError, match="No meet files found"):
            service.load_meet_results(tmp_path)
