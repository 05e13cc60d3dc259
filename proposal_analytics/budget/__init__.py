"""Budget aggregation for proposal budgets."""

from .aggregator import (
    BUDGET_CATEGORY_LABELS,
    summarize_budget,
    budget_variance,
    variance_status,
    matching_shortfall,
    is_match_met,
    category_percent,
    category_label,
    category_breakdown,
    update_line_item,
)

__all__ = [
    "BUDGET_CATEGORY_LABELS",
    "summarize_budget",
    "budget_variance",
    "variance_status",
    "matching_shortfall",
    "is_match_met",
    "category_percent",
    "category_label",
    "category_breakdown",
    "update_line_item",
]
