"""Plain text formatter for wind impact analyses."""

from __future__ import annotations

from windimpact.models import SegmentWindImpact, WindImpactAnalysis

SEPARATOR = "=" * 60


def format_analysis(analysis: WindImpactAnalysis, output_paths: list[str] | None = None) -> str:
    """Format a plain-text report of per-segment and path-level wind impact."""
    obs = analysis.observation
    summary = analysis.summary
    lines: list[str] = []

    lines.append(SEPARATOR)
    lines.append(f"  {analysis.path_name}")
    lines.append(
        f"  Wind: {obs.direction_deg:03d}° @ {obs.speed:.1f}  Temp: {obs.temperature:.1f}"
    )
    lines.append(f"  Computed: {analysis.computed_at.strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(SEPARATOR)
    lines.append("")

    lines.append("--- Segments ---")
    lines.append(f"  {'#':>3}  {'rel':>6}  {'head%':>7}  {'tail%':>7}  {'cross%':>7}")
    for idx, seg in enumerate(analysis.segments, start=1):
        lines.append(_format_segment(idx, seg))
    lines.append("")

    lines.append("--- Path summary ---")
    lines.append(f"  Headwind:  {summary.headwind_pct:6.2f}%")
    lines.append(f"  Tailwind:  {summary.tailwind_pct:6.2f}%")
    lines.append(f"  Crosswind: {summary.crosswind_pct:6.2f}%")

    if output_paths:
        lines.append("")
        lines.append("--- Output Files ---")
        for p in output_paths:
            lines.append(f"  {p}")

    lines.append(SEPARATOR)
    return "\n".join(lines)


def _format_segment(idx: int, seg: SegmentWindImpact) -> str:
    return (
        f"  {idx:>3}  {seg.relative_angle_deg:>6.0f}  {seg.headwind_pct:>7.2f}"
        f"  {seg.tailwind_pct:>7.2f}  {seg.crosswind_pct:>7.2f}"
    )
