"""Write qualifier counts to an Excel workbook."""

from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font

from swimqualifiers.logging import get_logger
from swimqualifiers.models.qualifier import QualifierReport
from swimqualifiers.models.swimmer import Sex
from swimqualifiers.services.standards_index import StandardsIndex

logger = get_logger(__name__)

SHEET_NAMES: dict[Sex, str] = {
    Sex.MEN: "Mens",
    Sex.WOMEN: "Womens",
}
ROWS_SHEET = "Qualifiers"
ROWS_HEADER = ["Sex", "Age Group", "Event", "Count"]

HEADER_FONT = Font(bold=True)


def write_qualifier_report(report: QualifierReport, index: StandardsIndex, path: Path) -> Path:
    """Save the qualifier counts as a workbook.

    One tab per sex lays the counts out as events (in standards order) by
    age groups, with zeros where nothing qualified, followed by the unique
    athlete and unique qualifier totals. A final tab lists the non-zero
    counts as (sex, age group, event, count) rows.

    Args:
        report: Finalized qualifier report
        index: Standards index the report was counted against
        path: Output workbook path; parent folders are created

    Returns:
        The path written
    """
    workbook = Workbook()
    workbook.remove(workbook.active)

    for sex in index.sexes:
        sheet = workbook.create_sheet(SHEET_NAMES[sex])
        labels = [group.label for group in index.age_groups_for(sex)]

        sheet.append(["Event", *labels])
        for event in index.events_for(sex):
            sheet.append([event, *(report.count_for(sex, label, event) for label in labels)])

        sheet.append([])
        sheet.append(
            [
                "Total Unique Athletes",
                *(report.unique_athletes.get((sex, label), 0) for label in labels),
            ]
        )
        sheet.append(
            [
                "Unique Qualifiers",
                *(report.unique_qualifiers.get((sex, label), 0) for label in labels),
            ]
        )
        _bold_first_row(sheet)

    rows_sheet = workbook.create_sheet(ROWS_SHEET)
    rows_sheet.append(ROWS_HEADER)
    for sex, label, event, count in report.rows():
        rows_sheet.append([sex.value, label, event, count])
    _bold_first_row(rows_sheet)

    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    logger.info("qualifier_report_written", path=str(path), entries=len(report.counts))
    return path


def _bold_first_row(sheet) -> None:
    for cell in sheet[1]:
        cell.font = HEADER_FONT
