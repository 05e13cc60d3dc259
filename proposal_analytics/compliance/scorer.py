"""Compliance checklist scoring.

An item counts as addressed when any proposal section mentions any one of
its keywords. The single-keyword match is deliberately permissive:
coincidental mentions produce false positives, and tightening it changes
which proposals report as compliant.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..config.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from ..models.proposal import (
    CHECKLIST_CATEGORIES,
    CategoryTally,
    ComplianceChecklistItem,
    ComplianceResult,
    ProposalSection,
    ScoredChecklistItem,
)
from ..sections.matcher import normalize

logger = logging.getLogger(__name__)


def extract_keywords(
    text: str,
    min_length: int = DEFAULT_THRESHOLDS.keyword_min_length,
) -> list[str]:
    """Lowercased whitespace tokens longer than `min_length` characters.

    Punctuation stays attached to the token.
    """
    return [token.lower() for token in (text or "").split() if len(token) > min_length]


def is_item_addressed(
    item: ComplianceChecklistItem,
    sections: Sequence[ProposalSection],
    min_length: int = DEFAULT_THRESHOLDS.keyword_min_length,
) -> bool:
    keywords = extract_keywords(item.item, min_length)
    if not keywords:
        return False

    for section in sections:
        if not section.content:
            continue
        content_lower = section.content.lower()
        if any(keyword in content_lower for keyword in keywords):
            return True
    return False


def compliance_band(
    score: int,
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> str:
    """Map a compliance percentage to 'good', 'fair' or 'low'."""
    if score >= thresholds.compliance_good_score:
        return "good"
    if score >= thresholds.compliance_fair_score:
        return "fair"
    return "low"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_compliance(
    checklist: Sequence[ComplianceChecklistItem],
    sections: Sequence[ProposalSection],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> ComplianceResult:
    """Score a compliance checklist against the current proposal sections.

    Args:
        checklist: Checklist items from the funder requirements.
        sections: Current proposal sections.
        thresholds: Heuristic thresholds (keyword length, score bands).

    Returns:
        ComplianceResult. `overall_percent` only considers required items and
        is 100 when none are required. `by_category` tallies every item,
        required or not, and always lists all four checklist categories.
    """
    by_category: dict[str, CategoryTally] = {
        category: CategoryTally() for category in CHECKLIST_CATEGORIES
    }
    scored_items: list[ScoredChecklistItem] = []
    required_total = 0
    required_addressed = 0

    for item in checklist:
        addressed = is_item_addressed(item, sections, thresholds.keyword_min_length)
        scored_items.append(
            ScoredChecklistItem(**item.model_dump(exclude={"addressed"}), addressed=addressed)
        )

        tally = by_category.setdefault(normalize(item.category), CategoryTally())
        tally.total += 1
        if addressed:
            tally.completed += 1

        if item.required:
            required_total += 1
            if addressed:
                required_addressed += 1

    if required_total == 0:
        overall = 100
    else:
        overall = _round_half_up(100 * required_addressed / required_total)

    logger.debug(
        "Compliance: %d/%d required items addressed (%d%%), %d items total",
        required_addressed,
        required_total,
        overall,
        len(scored_items),
    )

    return ComplianceResult(
        scored_items=scored_items,
        overall_percent=overall,
        by_category=by_category,
        required_total=required_total,
        required_addressed=required_addressed,
        band=compliance_band(overall, thresholds),
    )
