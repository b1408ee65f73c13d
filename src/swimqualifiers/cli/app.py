"""Swim qualifiers CLI application.

Usage:
    swimqualifiers count
    swimqualifiers count --standards timestandards.xlsx --data data --output counts.xlsx
    swimqualifiers standards --standards timestandards.xlsx
    swimqualifiers normalize "100 Bu" "200ME"
"""

import uuid
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load .env before settings are read
load_dotenv()
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from swimqualifiers.config import get_settings
from swimqualifiers.exceptions import EmptyStandardsError, ImportFileError
from swimqualifiers.logging import bind_context, clear_context, configure_logging
from swimqualifiers.models.qualifier import QualifierReport
from swimqualifiers.services.event_normalizer import normalize_event
from swimqualifiers.services.import_schemas import ImportIssue
from swimqualifiers.services.import_service import ImportService
from swimqualifiers.services.pipeline import count_qualifiers
from swimqualifiers.services.report_writer import write_qualifier_report
from swimqualifiers.services.standards_index import StandardsIndex

console = Console()
app = typer.Typer(
    name="swimqualifiers",
    help="Count meet results that meet age-group qualifying time standards",
    no_args_is_help=True,
)

MAX_ISSUES_SHOWN = 5


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Log level (default: LOG_LEVEL)"),
):
    """Configure logging before any command runs."""
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        log_format=settings.log_format,
        environment=settings.environment,
    )


# =============================================================================
# HELPERS
# =============================================================================


def _print_issues(title: str, issues: list[ImportIssue]) -> None:
    """Print the first few import issues."""
    if not issues:
        return
    console.print(f"[yellow]{title}: {len(issues)}[/yellow]")
    for issue in issues[:MAX_ISSUES_SHOWN]:
        console.print(f"  [dim]{escape(str(issue))}[/dim]")
    if len(issues) > MAX_ISSUES_SHOWN:
        console.print(f"  [dim]... and {len(issues) - MAX_ISSUES_SHOWN} more[/dim]")


def _load_index(service: ImportService, standards_file: Path) -> StandardsIndex:
    """Load and index standards, exiting with a message on failure."""
    try:
        with console.status(f"Loading time standards from {standards_file}..."):
            standards, issues = service.load_time_standards(standards_file)
    except ImportFileError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None
    _print_issues("Standards issues", issues)

    try:
        return StandardsIndex.build(standards)
    except EmptyStandardsError:
        console.print(f"[red]No time standards available in {standards_file}[/red]")
        raise typer.Exit(1) from None


def _make_diagnostics_table(report: QualifierReport) -> Table:
    diagnostics = report.diagnostics
    table = Table(title="Run Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Results ingested", str(diagnostics.total_results))
    table.add_row("Distinct ages", ", ".join(str(a) for a in diagnostics.distinct_ages) or "-")
    table.add_row("Distinct events", str(len(diagnostics.distinct_events)))
    table.add_row("Qualifying", str(diagnostics.qualifying))
    table.add_row("Not qualifying", str(diagnostics.not_qualifying))
    table.add_row("Unmatched", str(diagnostics.unmatched))
    table.add_row("Invalid records", str(diagnostics.invalid))
    table.add_row("Qualifier entries", str(diagnostics.entry_count))
    return table


def _make_counts_table(report: QualifierReport) -> Table:
    table = Table(title=f"Qualifiers ({report.total_qualifiers})")
    table.add_column("Sex", style="cyan")
    table.add_column("Age Group")
    table.add_column("Event")
    table.add_column("Count", justify="right", style="green")

    for sex, label, event, count in report.rows():
        table.add_row(sex.value, label, event, str(count))
    return table


# =============================================================================
# COMMANDS
# =============================================================================


@app.command("count")
def count(
    standards_file: Path = typer.Option(
        None, "--standards", "-s", help="Time standards workbook (default: STANDARDS_FILE)"
    ),
    data_folder: Path = typer.Option(
        None, "--data", "-d", help="Folder of meet result workbooks (default: DATA_FOLDER)"
    ),
    output_file: Path = typer.Option(
        None, "--output", "-o", help="Qualifier count workbook to write (default: OUTPUT_FILE)"
    ),
    prefix: str = typer.Option(
        None, "--prefix", help="Meet file name prefix (default: MEET_FILE_PREFIX)"
    ),
):
    """Count qualifying results per sex, age group and event."""
    settings = get_settings()
    standards_file = standards_file or settings.standards_file
    data_folder = data_folder or settings.data_folder
    output_file = output_file or settings.output_file
    service = ImportService(meet_file_prefix=prefix or settings.meet_file_prefix)

    bind_context(run_id=uuid.uuid4().hex[:12])
    try:
        index = _load_index(service, standards_file)
        console.print(f"[green]Indexed {len(index)} time standards[/green]")

        try:
            with console.status(f"Reading meet files from {data_folder}..."):
                results, issues = service.load_meet_results(data_folder)
        except ImportFileError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1) from None
        _print_issues("Meet file issues", issues)
        console.print(f"[green]Read {len(results)} results[/green]")

        report = count_qualifiers(results, index)
        console.print()
        console.print(_make_diagnostics_table(report))
        if report.counts:
            console.print(_make_counts_table(report))
        else:
            console.print("[yellow]No qualifying results[/yellow]")

        write_qualifier_report(report, index, output_file)
        console.print()
        console.print(f"[green]Results saved to:[/green] {output_file}")
    finally:
        clear_context()


@app.command("standards")
def standards(
    standards_file: Path = typer.Option(
        None, "--standards", "-s", help="Time standards workbook (default: STANDARDS_FILE)"
    ),
):
    """Show the age groups and events loaded from a standards workbook."""
    settings = get_settings()
    service = ImportService(meet_file_prefix=settings.meet_file_prefix)
    index = _load_index(service, standards_file or settings.standards_file)

    table = Table(title=f"Time Standards ({len(index)})")
    table.add_column("Sex", style="cyan")
    table.add_column("Events", justify="right")
    table.add_column("Age Groups")
    table.add_column("Sample Events", style="dim")

    for sex in index.sexes:
        events = index.events_for(sex)
        table.add_row(
            sex.value,
            str(len(events)),
            ", ".join(group.label for group in index.age_groups_for(sex)),
            ", ".join(events[:5]),
        )

    console.print(table)


@app.command("normalize")
def normalize(
    events: list[str] = typer.Argument(..., help="Event labels to normalize"),
):
    """Show the canonical form of event labels."""
    table = Table(title="Event Labels")
    table.add_column("Raw", style="cyan")
    table.add_column("Canonical", style="green")

    for event in events:
        table.add_row(event, normalize_event(event))

    console.print(table)


if __name__ == "__main__":
    app()
