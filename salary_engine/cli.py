"""
Command-line interface for the salary estimator.

- estimate: salary range for a specialty/location/experience
- locations: cities and states that have active postings
"""
from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from salary_engine.config import Settings, load_settings
from salary_engine.errors import SalaryEstimationError
from salary_engine.estimator import SalaryEstimator
from salary_engine.locations import list_locations
from salary_engine.log import get_logger
from salary_engine.report import build_estimate_report, build_locations_report
from salary_engine.store import get_store

log = get_logger(__name__)

app = typer.Typer(help="Nursing salary estimator")


def _settings(postings: Optional[Path]) -> Settings:
    settings = load_settings()
    if postings is not None:
        settings = replace(settings, postings_path=postings)
    return settings


@app.command()
def estimate(
    specialty: str,
    location: str,
    years: int,
    job_type: Optional[str] = typer.Option(None, "--job-type", help="e.g. full-time, part-time, prn, travel"),
    shift_type: Optional[str] = typer.Option(None, "--shift-type", help="e.g. day, night, rotating"),
    postings: Optional[Path] = typer.Option(None, "--postings", help="CSV export of job postings"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw estimate as JSON"),
):
    """Estimate annual and hourly pay for a specialty in a location."""
    settings = _settings(postings)
    estimator = SalaryEstimator.from_settings(get_store(settings), settings)
    try:
        result = estimator.estimate(specialty, location, years, job_type, shift_type)
    except SalaryEstimationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(build_estimate_report(result))


@app.command()
def locations(
    limit: int = typer.Option(25, "--limit", help="Maximum suggestions to show (0 = all)"),
    postings: Optional[Path] = typer.Option(None, "--postings", help="CSV export of job postings"),
):
    """List cities and states with active postings, busiest first."""
    store = get_store(_settings(postings))
    typer.echo(build_locations_report(list_locations(store), limit=limit or None))


if __name__ == "__main__":
    app()
