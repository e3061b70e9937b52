"""
Pareto Analyzer — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Resolve inputs (spreadsheet URL or local file).
  4. Run the analysis.
  5. Report the result to stdout and optionally export files.

Install and run::

    pip install -e .
    pareto-analyzer --help
    pareto-analyzer validate-config
    pareto-analyzer analyze "https://docs.google.com/spreadsheets/d/<id>/edit"
    pareto-analyzer analyze --file data/sales.csv --top 0 --csv-out out/sales.csv
    pareto-analyzer analyze --file data/sales.csv --json-out -
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="pareto-analyzer",
    help="Pareto (80/20) priority analysis for spreadsheet exports.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from pareto_analyzer.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config; ``debug = true`` forces DEBUG level."""
    from pareto_analyzer.utils.logging import configure_logging

    logging_config = config.logging
    if config.debug:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(logging_config)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("analyze")
def analyze(
    locator: Optional[str] = typer.Argument(
        None,
        help="Spreadsheet URL (Google Sheets share link or direct CSV URL) or local path.",
    ),
    file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Local CSV file to analyse (alternative to LOCATOR).",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        help="Rows to show in the ranking table (0 = all). Uses config default if omitted.",
    ),
    label_column: Optional[str] = typer.Option(
        None,
        "--label-column",
        help="Column used to label rows in the table (default: first column).",
    ),
    show_recommendations: int = typer.Option(
        3,
        "--recommendations",
        help="Print guidance for the N highest-ranked rows (0 = none).",
    ),
    honor_quotes: Optional[bool] = typer.Option(
        None,
        "--honor-quotes/--raw-split",
        help="Keep commas inside quoted cells instead of splitting on every comma.",
    ),
    json_out: Optional[str] = typer.Option(
        None,
        "--json-out",
        help="Write the full report as JSON to this path ('-' for stdout only).",
    ),
    csv_out: Optional[str] = typer.Option(
        None,
        "--csv-out",
        help="Write one flat CSV row per analysed record to this path.",
    ),
    save: bool = typer.Option(
        False,
        "--save",
        help="Write JSON + CSV reports to the configured report.output_dir.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Rank spreadsheet rows by numeric value and classify them 80/20.

    \b
    Each row's value is the sum of the absolute values of its numeric cells.
    Rows are ranked by value; their cumulative share of the total decides
    the tier:
      <= 80%  Alta Prioridad
      <= 95%  Media Prioridad
      >  95%  Baja Prioridad
    """
    from pareto_analyzer.analysis.engine import analyze_text
    from pareto_analyzer.errors import EmptyInputError, SourceUnavailableError
    from pareto_analyzer.ingestion.sheet_source import read_document
    from pareto_analyzer.reporting.export import (
        default_report_paths,
        export_to_csv,
        export_to_json,
        flatten_report_for_export,
    )
    from pareto_analyzer.reporting.formatters import (
        format_ranked_table,
        format_recommendations,
        format_report_summary,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if locator and file:
        typer.echo("[ERROR] Pass either LOCATOR or --file, not both.", err=True)
        raise typer.Exit(code=1)
    source = locator or file
    if not source:
        typer.echo("[ERROR] A spreadsheet URL or --file path is required.", err=True)
        raise typer.Exit(code=1)

    use_quotes = config.parsing.honor_quotes if honor_quotes is None else honor_quotes
    table_rows = config.report.top_n if top is None else top
    if table_rows < 0:
        typer.echo("[ERROR] --top must be >= 0.", err=True)
        raise typer.Exit(code=1)

    try:
        text = read_document(
            source,
            timeout_s=config.source.timeout_s,
            follow_redirects=config.source.follow_redirects,
        )
        report = analyze_text(text, honor_quotes=use_quotes, source=source)
    except (EmptyInputError, SourceUnavailableError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    payload = report.to_payload()

    if json_out == "-":
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
        return

    typer.echo(format_report_summary(report))
    typer.echo(format_ranked_table(report, top_n=table_rows, label_column=label_column))
    if show_recommendations > 0:
        typer.echo(format_recommendations(report, top_n=show_recommendations))

    json_targets: list[Path] = [Path(json_out)] if json_out else []
    csv_targets: list[Path] = [Path(csv_out)] if csv_out else []
    if save:
        saved_json, saved_csv = default_report_paths(Path(config.report.output_dir), source)
        json_targets.append(saved_json)
        csv_targets.append(saved_csv)

    if json_targets or csv_targets:
        typer.echo("")
    for target in json_targets:
        typer.echo(f"  JSON report: {export_to_json(payload, target)}")
    if csv_targets:
        flat_rows = flatten_report_for_export(payload)
        for target in csv_targets:
            typer.echo(f"  CSV report:  {export_to_csv(flat_rows, target)}")

    typer.echo("")
    typer.echo("[OK] Analysis complete.")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Honor quotes:     {config.parsing.honor_quotes}")
    typer.echo(f"  Fetch timeout:    {config.source.timeout_s}s")
    typer.echo(f"  Report dir:       {config.report.output_dir}")
    typer.echo(f"  Table rows:       {config.report.top_n}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
