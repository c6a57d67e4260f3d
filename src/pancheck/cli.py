"""Command-line interface for the pancheck pipeline."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from pancheck.config.settings import PipelineConfig

app = typer.Typer(
    name="pancheck",
    help="Clean and validate batches of PAN numbers.",
    no_args_is_help=True,
)

console = Console()


def _load_pipeline_config(config: Path) -> "PipelineConfig":
    """Load configuration and set up logging, exiting on invalid config."""
    from pydantic import ValidationError

    from pancheck.config.loader import load_config
    from pancheck.utils.logging import configure_logging

    try:
        pipeline_config = load_config(config)
    except (ValueError, ValidationError) as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=pipeline_config.logging.level,
        json_output=pipeline_config.logging.json_output,
    )
    return pipeline_config


@app.command()
def run(
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Directory for pan_outcomes.csv and pan_summary.json.",
        ),
    ] = None,
    show_records: Annotated[
        bool,
        typer.Option(
            "--show-records",
            help="List every classified PAN.",
        ),
    ] = False,
    no_export: Annotated[
        bool,
        typer.Option(
            "--no-export",
            help="Skip writing result files.",
        ),
    ] = False,
) -> None:
    """Run the cleaning and validation pipeline on a staging dataset."""
    from pandera.errors import SchemaError

    from pancheck.etl import run_pipeline
    from pancheck.validation.reporter import ConsoleReporter

    console.print(f"[blue]Loading configuration from {config}[/blue]")
    pipeline_config = _load_pipeline_config(config)

    try:
        result = run_pipeline(
            pipeline_config,
            output_dir=output,
            export=False if no_export else None,
        )
    except FileNotFoundError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    except (ValueError, SchemaError) as e:
        console.print(f"[red]Pipeline failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    reporter = ConsoleReporter(console)
    reporter.print_profile(result.profile)
    reporter.print_results(result.batch, show_records=show_records)

    for name, path in result.output_paths.items():
        console.print(f"[green]Saved {name} to: {path}[/green]")


@app.command()
def check(
    values: Annotated[
        list[str],
        typer.Argument(help="One or more PAN values to check."),
    ],
) -> None:
    """
    Check individual PAN values and show which rules fail.

    This is a per-value diagnostic: values are not deduplicated or
    summarized. Use run for batch classification.

    Exits with code 1 if any value is invalid or blank.
    """
    from pancheck.normalization import normalize
    from pancheck.validation import PanStatus, check_rules
    from pancheck.validation.reporter import ConsoleReporter

    checks = []
    for raw in values:
        clean = normalize(raw)
        checks.append((raw, check_rules(clean) if clean is not None else None))

    ConsoleReporter(console).print_checks(checks)

    if any(result is None or result.status is PanStatus.INVALID for _, result in checks):
        raise typer.Exit(code=1)


@app.command()
def profile(
    config: Annotated[
        Path,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration YAML file.",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Profile data quality of a staging dataset without validating it."""
    from pandera.errors import SchemaError

    from pancheck.ingestion import PanRecordLoader
    from pancheck.profiling import profile_records
    from pancheck.validation.reporter import ConsoleReporter

    pipeline_config = _load_pipeline_config(config)

    try:
        raw_records = PanRecordLoader(pipeline_config).load_raw_records()
    except FileNotFoundError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    except (ValueError, SchemaError) as e:
        console.print(f"[red]Loading failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    ConsoleReporter(console).print_profile(profile_records(raw_records))


@app.command()
def version() -> None:
    """Show version information."""
    from pancheck import __version__

    console.print(f"pancheck version {__version__}")


if __name__ == "__main__":
    app()
