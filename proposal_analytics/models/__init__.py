"""Shared Pydantic models for proposal analytics."""

from .budget import BudgetLineItem, BudgetSummary, CategoryShare
from .proposal import (
    RequiredSection,
    ProposalSection,
    ComplianceChecklistItem,
    ScoredChecklistItem,
    CategoryTally,
    ComplianceResult,
    RequiredSectionStatus,
    SectionCompletion,
)
from .opportunity import TrackedOpportunity, FunnelStage, PipelineMetrics

__all__ = [
    "BudgetLineItem",
    "BudgetSummary",
    "CategoryShare",
    "RequiredSection",
    "ProposalSection",
    "ComplianceChecklistItem",
    "ScoredChecklistItem",
    "CategoryTally",
    "ComplianceResult",
    "RequiredSectionStatus",
    "SectionCompletion",
    "TrackedOpportunity",
    "FunnelStage",
    "PipelineMetrics",
]
