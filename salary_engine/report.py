"""Render salary estimates and location suggestions as markdown."""
from __future__ import annotations

from salary_engine.models import Baseline, LocationSuggestion, SalaryEstimate


def _money(value: float) -> str:
    return f"${value:,.0f}"


def _hourly(value: float) -> str:
    return f"${value:,.2f}/hr"


def _baseline_line(label: str, baseline: Baseline | None) -> str:
    if baseline is None:
        return f"- {label}: not enough data"
    return f"- {label}: {_money(baseline.annual)} ({_hourly(baseline.hourly)})"


def build_estimate_report(estimate: SalaryEstimate) -> str:
    meta = estimate.metadata
    lines: list[str] = [
        f"# {meta.specialty} salary — {meta.location}",
        "",
        f"**{_money(estimate.annual.min)} – {_money(estimate.annual.max)}** per year",
        f"**{_hourly(estimate.hourly.min)} – {_hourly(estimate.hourly.max)}**",
        "",
        f"Based on {meta.sample_count} posting(s), {meta.years_experience} year(s) of "
        f"experience (x{meta.experience_multiplier:.2f}).",
    ]

    if meta.fallback_to_state:
        lines.append("Not enough city data; figures use statewide postings.")

    dropped = []
    if meta.requested_job_type and not meta.filters_applied.job_type:
        dropped.append(f"job type '{meta.requested_job_type}'")
    if meta.requested_shift_type and not meta.filters_applied.shift_type:
        dropped.append(f"shift '{meta.requested_shift_type}'")
    if dropped:
        lines.append(f"Filters relaxed for more data: {', '.join(dropped)}.")

    lines += [
        "",
        "## Market comparison (max annual, unadjusted)",
        "",
        _baseline_line("State average", estimate.state),
        _baseline_line("National average", estimate.national),
    ]
    return "\n".join(lines)


def build_locations_report(suggestions: list[LocationSuggestion], limit: int | None = None) -> str:
    shown = suggestions[:limit] if limit else suggestions
    if not shown:
        return "No active postings with a location."
    lines = ["| Location | Type | Jobs |", "|---|---|---|"]
    for s in shown:
        lines.append(f"| {s.label} | {s.kind} | {s.job_count} |")
    return "\n".join(lines)
