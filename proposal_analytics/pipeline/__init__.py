"""Opportunity pipeline analytics."""

from .analytics import (
    PIPELINE_STAGES,
    FUNNEL_STAGES,
    estimated_value,
    group_by_stage,
    filter_by_window,
    analyze_pipeline,
)

__all__ = [
    "PIPELINE_STAGES",
    "FUNNEL_STAGES",
    "estimated_value",
    "group_by_stage",
    "filter_by_window",
    "analyze_pipeline",
]
