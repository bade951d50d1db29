from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from barstock.schemas.availability import (
    AnalysisSummary,
    Availability,
    AvailabilityReport,
    InventoryItem,
    Recipe,
)

logger = logging.getLogger("barstock.availability")


def normalize_name(name: str | None) -> str | None:
    if name is None:
        return None
    return name.strip().lower()


def names_match(a: str | None, b: str | None) -> bool:
    left = normalize_name(a)
    if left is None:
        return False
    return left == normalize_name(b)


def _stocked_names(inventory: Iterable[InventoryItem]) -> frozenset[str]:
    return frozenset(n for n in (normalize_name(item.name) for item in inventory) if n is not None)


def _percentage(available: int, total: int) -> int:
    if total <= 0:
        return 0
    # round half up; builtin round() is banker's rounding
    return int(math.floor(available / total * 100 + 0.5))


def _classify(missing: int, total: int) -> Availability:
    if total > 0 and missing == 0:
        return "full"
    if missing < total:
        return "partial"
    return "none"


def _report(recipe: Recipe, stocked: frozenset[str]) -> AvailabilityReport:
    missing: list[str | None] = []
    available: list[str | None] = []
    for ingredient in recipe.ingredients:
        key = normalize_name(ingredient.name)
        if key is not None and key in stocked:
            available.append(ingredient.name)
        else:
            missing.append(ingredient.name)

    total = len(recipe.ingredients)
    return AvailabilityReport(
        recipe=recipe,
        availability=_classify(len(missing), total),
        missing_ingredients=tuple(missing),
        available_ingredients=tuple(available),
        missing_count=len(missing),
        total_ingredients=total,
        percentage_available=_percentage(len(available), total),
    )


def build_report(recipe: Recipe, inventory: Sequence[InventoryItem]) -> AvailabilityReport:
    """Check which of ``recipe``'s ingredients are stocked.

    Presence only: volumes are ignored and one inventory item may satisfy
    any number of ingredient lines.
    """
    return _report(recipe, _stocked_names(inventory))


def analyze(recipes: Sequence[Recipe], inventory: Sequence[InventoryItem]) -> list[AvailabilityReport]:
    stocked = _stocked_names(inventory)
    reports = [_report(recipe, stocked) for recipe in recipes]
    logger.debug(
        "Analyzed %s recipes against %s inventory items (%s distinct names)",
        len(reports),
        len(inventory),
        len(stocked),
    )
    return reports


def summarize(reports: Iterable[AvailabilityReport]) -> AnalysisSummary:
    full = partial = none = 0
    for report in reports:
        if report.availability == "full":
            full += 1
        elif report.availability == "partial":
            partial += 1
        else:
            none += 1
    return AnalysisSummary(fully_makeable=full, partially_makeable=partial, not_makeable=none)


def rank(reports: Iterable[AvailabilityReport]) -> list[AvailabilityReport]:
    """Most makeable first. Ties keep their input order (sorted() is stable)."""
    return sorted(reports, key=lambda r: r.rank_key, reverse=True)
