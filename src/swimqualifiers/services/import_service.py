"""Service for reading time standards and meet results from Excel workbooks."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.workbook.workbook import Workbook

from swimqualifiers.exceptions import ImportFileError
from swimqualifiers.logging import get_logger
from swimqualifiers.models.age_group import AgeGroup
from swimqualifiers.models.meet_result import MeetResult
from swimqualifiers.models.swimmer import Sex
from swimqualifiers.models.time_standard import TimeStandard
from swimqualifiers.services.import_schemas import ImportIssue, MeetFileInfo, Severity
from swimqualifiers.services.time_parser import parse_time_to_seconds

logger = get_logger(__name__)

# Standards workbook tabs, matched case-insensitively
STANDARDS_SHEETS: dict[str, Sex] = {
    "mens": Sex.MEN,
    "men": Sex.MEN,
    "womens": Sex.WOMEN,
    "women": Sex.WOMEN,
}

# Meet export columns (0-based)
NAME_COLUMN = 4  # Column E
TIME_COLUMN = 9  # Column J

WORKBOOK_SUFFIXES = {".xlsx", ".xlsm"}
LEGACY_SUFFIXES = {".xls"}


def _cell_text(value: object) -> str:
    """Render a header or label cell as text ("12" rather than "12.0")."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


@contextmanager
def _open_workbook(path: Path) -> Iterator[Workbook]:
    """Open a workbook read-only with cached formula values."""
    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (BadZipFile, InvalidFileException, OSError, KeyError) as e:
        raise ImportFileError(f"Cannot open workbook '{path}': {e}") from e
    try:
        yield workbook
    finally:
        workbook.close()


class ImportService:
    """Service for reading standards and meet result workbooks."""

    def __init__(self, meet_file_prefix: str = "CAN-MBSK_"):
        self.meet_file_prefix = meet_file_prefix

    # =========================================================================
    # Time standards
    # =========================================================================

    def load_time_standards(self, path: Path) -> tuple[list[TimeStandard], list[ImportIssue]]:
        """Read a standards workbook with one tab per sex.

        Each tab has age group labels across row 1 (from column B) and an
        event label in column A of every following row; the cells hold
        qualifying times. Empty cells are skipped.

        Args:
            path: Path to the standards workbook

        Returns:
            Tuple of (standards, issues)

        Raises:
            ImportFileError: If the file is missing or not a workbook
        """
        if not path.is_file():
            raise ImportFileError(f"Time standards file not found: {path}")

        standards: list[TimeStandard] = []
        issues: list[ImportIssue] = []

        with _open_workbook(path) as workbook:
            tabs = [
                (name, STANDARDS_SHEETS[name.strip().lower()])
                for name in workbook.sheetnames
                if name.strip().lower() in STANDARDS_SHEETS
            ]
            if not tabs:
                issues.append(
                    ImportIssue(
                        file=path.name,
                        field="sheet",
                        message=f"No Mens/Womens tabs found (tabs: {', '.join(workbook.sheetnames)})",
                    )
                )

            for sheet_name, sex in tabs:
                sheet_standards = self._read_standards_sheet(
                    workbook[sheet_name], path.name, sex, issues
                )
                logger.info(
                    "standards_sheet_loaded",
                    file=path.name,
                    sheet=sheet_name,
                    sex=sex.value,
                    standards=len(sheet_standards),
                )
                standards.extend(sheet_standards)

        return standards, issues

    def _read_standards_sheet(
        self,
        worksheet,
        file_name: str,
        sex: Sex,
        issues: list[ImportIssue],
    ) -> list[TimeStandard]:
        rows = worksheet.iter_rows(values_only=True)
        header = next(rows, None)
        if header is None:
            issues.append(
                ImportIssue(
                    file=file_name,
                    sheet=worksheet.title,
                    field="sheet",
                    message="Sheet is empty",
                    severity=Severity.WARNING,
                )
            )
            return []

        # Column index -> age group
        columns: dict[int, AgeGroup] = {}
        for idx, cell in enumerate(header):
            label = _cell_text(cell)
            if idx == 0 or not label:
                continue
            try:
                columns[idx] = AgeGroup.parse(label)
            except ValueError as e:
                issues.append(
                    ImportIssue(
                        file=file_name,
                        sheet=worksheet.title,
                        row_number=1,
                        field="age_group",
                        message=str(e),
                    )
                )

        standards: list[TimeStandard] = []
        for row_num, row in enumerate(rows, start=2):
            if not row:
                continue
            event = _cell_text(row[0])
            if not event:
                continue

            for idx, age_group in columns.items():
                cell = row[idx] if idx < len(row) else None
                if cell is None or _cell_text(cell) == "":
                    continue

                seconds = parse_time_to_seconds(cell)
                if seconds is None or seconds <= 0:
                    issues.append(
                        ImportIssue(
                            file=file_name,
                            sheet=worksheet.title,
                            row_number=row_num,
                            field=age_group.label,
                            message=f"Invalid qualifying time for {event}: '{cell}'",
                            severity=Severity.WARNING,
                        )
                    )
                    continue

                standards.append(
                    TimeStandard(
                        sex=sex,
                        age_group=age_group,
                        event=event,
                        qualifying_time=seconds,
                    )
                )

        return standards

    # =========================================================================
    # Meet results
    # =========================================================================

    def discover_meet_files(self, folder: Path) -> list[Path]:
        """Find meet result workbooks in a folder, sorted by name.

        Raises:
            ImportFileError: If the folder does not exist
        """
        if not folder.is_dir():
            raise ImportFileError(f"Data folder not found: {folder}")

        suffixes = WORKBOOK_SUFFIXES | LEGACY_SUFFIXES
        return sorted(
            path
            for path in folder.iterdir()
            if path.is_file()
            and path.name.startswith(self.meet_file_prefix)
            and path.suffix.lower() in suffixes
        )

    def parse_meet_file(self, path: Path) -> tuple[list[MeetResult], list[ImportIssue]]:
        """Read every result from one meet workbook.

        Each worksheet is one event, named by the sheet. Rows without a
        positive time in column J are skipped (headers, DQs, blank lines).

        Args:
            path: Path to the meet workbook

        Returns:
            Tuple of (results, issues)
        """
        issues: list[ImportIssue] = []

        if path.suffix.lower() in LEGACY_SUFFIXES:
            issues.append(
                ImportIssue(
                    file=path.name,
                    field="file",
                    message="Legacy .xls files are not supported; save the file as .xlsx",
                )
            )
            return [], issues

        try:
            info = MeetFileInfo.from_path(path)
        except ValueError as e:
            issues.append(ImportIssue(file=path.name, field="file_name", message=str(e)))
            return [], issues

        results: list[MeetResult] = []
        with _open_workbook(path) as workbook:
            for worksheet in workbook.worksheets:
                event = worksheet.title.strip()
                if not event:
                    continue

                for row in worksheet.iter_rows(values_only=True):
                    if len(row) <= TIME_COLUMN:
                        continue

                    seconds = parse_time_to_seconds(row[TIME_COLUMN])
                    if seconds is None or seconds <= 0:
                        continue

                    name = row[NAME_COLUMN]
                    results.append(
                        MeetResult(
                            sex=info.sex,
                            age=info.age,
                            event=event,
                            time=seconds,
                            name=name.strip() if isinstance(name, str) else "",
                            course=info.course,
                        )
                    )

        logger.info(
            "meet_file_parsed",
            file=path.name,
            sex=info.sex.value,
            age=info.age,
            course=info.course,
            results=len(results),
        )
        return results, issues

    def load_meet_results(self, folder: Path) -> tuple[list[MeetResult], list[ImportIssue]]:
        """Read results from every meet workbook in a folder.

        Files that cannot be read are reported as issues and skipped.

        Raises:
            ImportFileError: If the folder is missing or holds no meet files
        """
        files = self.discover_meet_files(folder)
        if not files:
            raise ImportFileError(
                f"No meet files found in {folder} (expected '{self.meet_file_prefix}*.xlsx')"
            )

        results: list[MeetResult] = []
        issues: list[ImportIssue] = []
        for path in files:
            try:
                file_results, file_issues = self.parse_meet_file(path)
            except ImportFileError as e:
                logger.warning("meet_file_skipped", file=path.name, error=str(e))
                issues.append(ImportIssue(file=path.name, field="file", message=str(e)))
                continue
            results.extend(file_results)
            issues.extend(file_issues)

        logger.info("meet_results_loaded", files=len(files), results=len(results))
        return results, issues
