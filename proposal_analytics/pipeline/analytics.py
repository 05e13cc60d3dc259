"""Opportunity pipeline analytics - funnel stages, win rate and value metrics.

Only the six canonical funnel stages are counted. Anything else (archived,
or an unknown status) is dropped before any metric is computed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence

from ..config.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from ..models.opportunity import FunnelStage, PipelineMetrics, TrackedOpportunity

logger = logging.getLogger(__name__)

PIPELINE_STAGES: tuple[str, ...] = ("new", "reviewing", "pursuing", "submitted", "won", "lost")
FUNNEL_STAGES: tuple[str, ...] = ("new", "reviewing", "pursuing", "submitted", "won")
CLOSED_STAGES = {"won", "lost"}


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so naive and aware values compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def estimated_value(opportunity: TrackedOpportunity) -> float:
    """Upper award bound, else lower bound, else 0."""
    if opportunity.award_amount_max is not None:
        return opportunity.award_amount_max
    if opportunity.award_amount_min is not None:
        return opportunity.award_amount_min
    return 0.0


def group_by_stage(
    opportunities: Iterable[TrackedOpportunity],
) -> dict[str, list[TrackedOpportunity]]:
    """Partition opportunities into the six pipeline stages, input order kept."""
    stages: dict[str, list[TrackedOpportunity]] = {stage: [] for stage in PIPELINE_STAGES}
    for opp in opportunities:
        if opp.status in stages:
            stages[opp.status].append(opp)
    return stages


def filter_by_window(
    opportunities: Iterable[TrackedOpportunity],
    days: Optional[int],
    as_of: datetime,
) -> list[TrackedOpportunity]:
    """Keep opportunities created within the last `days` days; None keeps all."""
    if days is None:
        return list(opportunities)
    cutoff = _as_utc(as_of) - timedelta(days=days)
    return [opp for opp in opportunities if _as_utc(opp.created_at) >= cutoff]


def _is_urgent(opportunity: TrackedOpportunity, as_of: datetime, window_days: int) -> bool:
    """Deadline day within [as_of day, as_of day + window_days], by UTC calendar day.

    A deadline earlier on the as_of day still counts; only earlier days are past due.
    """
    if opportunity.response_deadline is None:
        return False
    days_left = (_as_utc(opportunity.response_deadline).date() - _as_utc(as_of).date()).days
    return 0 <= days_left <= window_days


def _build_funnel(stages: dict[str, list[TrackedOpportunity]]) -> list[FunnelStage]:
    funnel: list[FunnelStage] = []
    previous_count: Optional[int] = None

    for stage in FUNNEL_STAGES:
        members = stages[stage]
        count = len(members)
        if previous_count is None:
            conversion_rate = None
        elif previous_count == 0:
            conversion_rate = 0.0
        else:
            conversion_rate = count / previous_count * 100
        funnel.append(
            FunnelStage(
                stage=stage,
                count=count,
                value=sum(estimated_value(opp) for opp in members),
                conversion_rate=conversion_rate,
            )
        )
        previous_count = count

    return funnel


def analyze_pipeline(
    opportunities: Sequence[TrackedOpportunity],
    as_of: datetime,
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> PipelineMetrics:
    """Compute pipeline metrics for a snapshot of tracked opportunities.

    Args:
        opportunities: Tracked opportunities in any status.
        as_of: Reference time for deadline urgency.
        thresholds: Heuristic thresholds (urgent deadline window).

    Returns:
        PipelineMetrics. Every ratio falls back to 0 when its denominator is
        empty; the first funnel stage has no conversion rate.
    """
    stages = group_by_stage(opportunities)

    active = [
        opp
        for stage, members in stages.items()
        if stage not in CLOSED_STAGES
        for opp in members
    ]
    won = stages["won"]
    lost = stages["lost"]

    decided = len(won) + len(lost)
    win_rate = len(won) / decided * 100 if decided > 0 else 0.0

    scored = [opp.alignment_score for opp in active if opp.alignment_score is not None]
    avg_alignment = sum(scored) / len(scored) if scored else 0.0

    urgent = sum(
        1 for opp in active if _is_urgent(opp, as_of, thresholds.urgent_deadline_days)
    )

    metrics = PipelineMetrics(
        total=sum(len(members) for members in stages.values()),
        active=len(active),
        won_count=len(won),
        lost_count=len(lost),
        total_potential_value=sum(estimated_value(opp) for opp in active),
        won_value=sum(estimated_value(opp) for opp in won),
        win_rate=win_rate,
        avg_alignment_score=avg_alignment,
        urgent_deadlines=urgent,
        stage_counts={stage: len(members) for stage, members in stages.items()},
        funnel=_build_funnel(stages),
    )

    logger.debug(
        "Pipeline: %d tracked, %d active, win rate %.1f%%, %d urgent",
        metrics.total,
        metrics.active,
        metrics.win_rate,
        metrics.urgent_deadlines,
    )
    return metrics
