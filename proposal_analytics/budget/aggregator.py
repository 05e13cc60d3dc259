"""Budget roll-up for the proposal budget builder.

Totals are always recomputed from quantity * unit cost; nothing here reads a
stored line total.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..models.budget import BudgetLineItem, BudgetSummary, CategoryShare

logger = logging.getLogger(__name__)

BUDGET_CATEGORY_LABELS: dict[str, str] = {
    "personnel": "Personnel & Salaries",
    "fringe": "Fringe Benefits",
    "travel": "Travel",
    "equipment": "Equipment",
    "supplies": "Supplies",
    "contractual": "Contractual/Consultants",
    "construction": "Construction",
    "other": "Other Direct Costs",
    "indirect": "Indirect/F&A Costs",
}

_CATEGORY_ORDER = {key: idx for idx, key in enumerate(BUDGET_CATEGORY_LABELS)}


def summarize_budget(line_items: Iterable[BudgetLineItem]) -> BudgetSummary:
    """Roll line items up into funding-source and category totals.

    Args:
        line_items: Budget line items in any order. May be empty.

    Returns:
        BudgetSummary. `grand_total` is the sum of the three funding-source
        buckets; `by_category` is keyed by category enum value and only
        contains categories that appear in the input.
    """
    total_requested = 0.0
    total_matching = 0.0
    total_in_kind = 0.0
    by_category: dict[str, float] = {}
    count = 0

    for item in line_items:
        total = item.quantity * item.unit_cost
        count += 1

        if item.funding_source == "requested":
            total_requested += total
        elif item.funding_source == "matching":
            total_matching += total
        else:
            total_in_kind += total

        by_category[item.category] = by_category.get(item.category, 0.0) + total

    grand_total = total_requested + total_matching + total_in_kind

    logger.debug(
        "Budget summary: %d items, requested=%.2f matching=%.2f in_kind=%.2f",
        count,
        total_requested,
        total_matching,
        total_in_kind,
    )

    return BudgetSummary(
        total_requested=total_requested,
        total_matching=total_matching,
        total_in_kind=total_in_kind,
        grand_total=grand_total,
        by_category=by_category,
    )


def budget_variance(summary: BudgetSummary, target_requested_amount: Optional[float]) -> float:
    """Requested total minus the target. Positive is over budget.

    A missing or zero target means there is nothing to compare against, so
    the variance is 0.
    """
    if not target_requested_amount or target_requested_amount <= 0:
        return 0.0
    return summary.total_requested - target_requested_amount


def variance_status(variance: float) -> str:
    """Label a variance as 'over', 'under' or 'on_target'."""
    if variance > 0:
        return "over"
    if variance < 0:
        return "under"
    return "on_target"


def matching_shortfall(summary: BudgetSummary, matching_required: float) -> float:
    """Amount of match still needed; 0 once the requirement is met."""
    return max(matching_required - summary.total_matching, 0.0)


def is_match_met(summary: BudgetSummary, matching_required: float) -> bool:
    return summary.total_matching >= matching_required


def category_percent(category_total: float, grand_total: float) -> float:
    """Category share of the grand total as a percentage (0 for an empty budget)."""
    if grand_total == 0:
        return 0.0
    return category_total / grand_total * 100


def category_label(category: str) -> str:
    return BUDGET_CATEGORY_LABELS.get(category, category)


def category_breakdown(summary: BudgetSummary) -> list[CategoryShare]:
    """Category rows for display, largest amount first."""
    rows = sorted(
        summary.by_category.items(),
        key=lambda kv: (-kv[1], _CATEGORY_ORDER.get(kv[0], len(_CATEGORY_ORDER))),
    )
    return [
        CategoryShare(
            category=category,
            label=category_label(category),
            amount=amount,
            percent=category_percent(amount, summary.grand_total),
        )
        for category, amount in rows
    ]


def update_line_item(item: BudgetLineItem, **changes) -> BudgetLineItem:
    """Return a revalidated copy of `item` with `changes` applied.

    The input item is left untouched. Field names may be given in
    snake_case (unit_cost=...) or camelCase (unitCost=...).
    """
    aliases = {
        field.alias: name
        for name, field in BudgetLineItem.model_fields.items()
        if field.alias
    }
    data = item.model_dump(exclude={"total"})
    for key, value in changes.items():
        data[aliases.get(key, key)] = value
    return BudgetLineItem.model_validate(data)
