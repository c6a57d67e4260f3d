"""
Console reporter for PAN validation results.

Formats outcomes, summaries and data quality profiles using Rich.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pancheck.batch.processor import BatchResult, Summary
from pancheck.profiling.quality import DataQualityProfile
from pancheck.validation.core import PanStatus, RuleChecks

MAX_DUPLICATES_SHOWN = 10


class ConsoleReporter:
    """Formats and displays PAN validation results to the console."""

    def __init__(self, console: Console | None = None) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output. Creates new if not provided.
        """
        self.console = console or Console()

    def print_results(self, result: BatchResult, *, show_records: bool = False) -> None:
        """
        Print the batch result.

        Args:
            result: Batch result to display.
            show_records: Also list every classified record.
        """
        if show_records:
            self._print_outcomes(result)
        self.print_summary(result.summary)

    def _print_outcomes(self, result: BatchResult) -> None:
        """Print one row per classified record."""
        table = Table(title="PAN Classification", show_header=True)
        table.add_column("PAN", style="cyan", no_wrap=True)
        table.add_column("Status", justify="center")

        for outcome in sorted(result.outcomes, key=lambda o: o.pan_number):
            table.add_row(escape(outcome.pan_number), self._format_status(outcome.status))

        self.console.print(table)

    def _format_status(self, status: PanStatus) -> str:
        """Format a status with color markup."""
        if status is PanStatus.VALID:
            return f"[green]{status.value}[/green]"
        return f"[red]{status.value}[/red]"

    def print_summary(self, summary: Summary) -> None:
        """
        Print summary counts.

        Args:
            summary: Batch summary.
        """
        table = Table(title="Summary", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")

        table.add_row("Total processed records", str(summary.total_processed_records))
        table.add_row("[green]Valid PANs[/green]", str(summary.total_valid_pans))
        table.add_row("[red]Invalid PANs[/red]", str(summary.total_invalid_pans))
        table.add_row(
            "[yellow]Missing / incomplete[/yellow]", str(summary.total_missing_pans)
        )

        self.console.print()
        self.console.print(table)

    def print_profile(self, profile: DataQualityProfile) -> None:
        """
        Print a data quality profile.

        Args:
            profile: Profile of the raw batch.
        """
        table = Table(title="Data Quality Profile", show_header=True)
        table.add_column("Check", style="cyan")
        table.add_column("Records", justify="right")

        table.add_row("Total records", str(profile.total_records))
        table.add_row("Missing (null)", str(profile.null_records))
        table.add_row("Blank", str(profile.blank_records))
        table.add_row("Leading/trailing spaces", str(profile.untrimmed_records))
        table.add_row("Not upper case", str(profile.non_uppercase_records))
        table.add_row("Duplicate records", str(profile.duplicate_records))
        table.add_row("Unique clean records", str(profile.clean_unique_records))

        self.console.print()
        self.console.print(table)

        if profile.duplicate_values:
            self.console.print()
            self.console.print("[bold]Most frequent duplicates:[/bold]")
            ranked = sorted(
                profile.duplicate_values.items(), key=lambda item: (-item[1], item[0])
            )
            for value, count in ranked[:MAX_DUPLICATES_SHOWN]:
                self.console.print(f"  {escape(repr(value))}: {count}")

    def print_checks(self, checks: list[tuple[str | None, RuleChecks | None]]) -> None:
        """
        Print per-rule results for individual values.

        Args:
            checks: Pairs of (raw value, rule checks); checks is None for
                values discarded by normalization.
        """
        table = Table(title="PAN Check", show_header=True)
        table.add_column("Input", style="cyan")
        table.add_column("Normalized")
        table.add_column("Status", justify="center")
        table.add_column("Failed rules", style="dim")

        for raw, result in checks:
            if result is None:
                table.add_row(escape(repr(raw)), "-", "[yellow]Missing[/yellow]", "blank")
                continue
            table.add_row(
                escape(repr(raw)),
                escape(result.pan_number),
                self._format_status(result.status),
                ", ".join(result.failed_rules) or "-",
            )

        self.console.print(table)
