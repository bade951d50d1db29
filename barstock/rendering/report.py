from __future__ import annotations

from typing import Sequence

from barstock.schemas.availability import AvailabilityReport
from barstock.services.availability import rank, summarize
from barstock.settings import settings


_STATUS = {"full": "[ok]", "partial": "[~]", "none": "[x]"}


def _names(names) -> str:
    return ", ".join(n for n in names if n) or "-"


def _title(report: AvailabilityReport) -> str:
    return report.recipe.name or "(unnamed recipe)"


def render_availability_report(reports: Sequence[AvailabilityReport], inventory_count: int | None = None) -> str:
    summary = summarize(reports)
    lines = ["Recipe availability", "==================="]
    if inventory_count is not None:
        lines.append(f"Inventory items: {inventory_count}")
    lines.append(f"Total recipes: {len(reports)}")
    lines.append("")
    lines.append("Summary:")
    lines.append(f"  Can make fully: {summary.fully_makeable} recipes")
    lines.append(f"  Can make partially: {summary.partially_makeable} recipes")
    lines.append(f"  Cannot make: {summary.not_makeable} recipes")

    full = [r for r in reports if r.availability == "full"]
    partial = [r for r in reports if r.availability == "partial"]
    none = [r for r in reports if r.availability == "none"]

    if full:
        lines.append("\nCan make right now:")
        for r in full:
            category = f" ({r.recipe.category})" if r.recipe.category else ""
            lines.append(f"  {_STATUS['full']} {_title(r)}{category}")

    if partial:
        lines.append("\nCan partially make:")
        for r in partial:
            lines.append(f"  {_STATUS['partial']} {_title(r)} ({r.percentage_available}% available)")
            lines.append(f"      Missing: {_names(r.missing_ingredients)}")

    if none:
        lines.append("\nCannot make:")
        for r in none:
            lines.append(f"  {_STATUS['none']} {_title(r)}")
            lines.append(f"      Need: {_names(r.missing_ingredients)}")

    ranked = rank(reports)
    limit = settings.REPORT_DETAIL_LIMIT
    if limit is not None:
        ranked = ranked[: max(0, limit)]
    if ranked:
        lines.append("\nBy makeability:")
        for r in ranked:
            lines.append(
                f"  {_STATUS[r.availability]} {_title(r)} - {r.percentage_available}% "
                f"({len(r.available_ingredients)}/{r.total_ingredients} ingredients)"
            )

    return "\n".join(lines)
