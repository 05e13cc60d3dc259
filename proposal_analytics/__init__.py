"""Proposal financial and compliance analytics.

Pure aggregation functions over already-loaded workspace records.
"""

from .budget import summarize_budget
from .sections import match_required_section
from .compliance import score_compliance
from .pipeline import analyze_pipeline
from .models import (
    BudgetLineItem,
    BudgetSummary,
    RequiredSection,
    ProposalSection,
    ComplianceChecklistItem,
    ComplianceResult,
    TrackedOpportunity,
    PipelineMetrics,
)

__all__ = [
    "summarize_budget",
    "match_required_section",
    "score_compliance",
    "analyze_pipeline",
    "BudgetLineItem",
    "BudgetSummary",
    "RequiredSection",
    "ProposalSection",
    "ComplianceChecklistItem",
    "ComplianceResult",
    "TrackedOpportunity",
    "PipelineMetrics",
]
