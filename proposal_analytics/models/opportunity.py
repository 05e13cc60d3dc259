"""TrackedOpportunity - an opportunity record as it sits in the pipeline board."""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


class TrackedOpportunity(BaseModel):
    """An RFP / grant opportunity being tracked through the pipeline.

    Status is set by user action elsewhere; analytics only read it.
    """

    id: str
    title: str = ""
    organization: Optional[str] = Field(None, description="Funder / issuing organization")
    status: str = Field(
        default="new",
        description="new, reviewing, pursuing, submitted, won, lost or archived",
    )
    response_deadline: Optional[datetime] = None
    award_amount_min: Optional[float] = Field(None, ge=0)
    award_amount_max: Optional[float] = Field(None, ge=0)
    alignment_score: Optional[float] = Field(None, ge=0, le=100)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        json_schema_extra = {
            "example": {
                "id": "rfp-001",
                "title": "Community Health Outreach Grant",
                "organization": "Robert Wood Johnson Foundation",
                "status": "pursuing",
                "response_deadline": "2026-11-01T23:59:59Z",
                "award_amount_min": 50000.0,
                "award_amount_max": 150000.0,
                "alignment_score": 82,
                "created_at": "2026-09-15T10:00:00Z",
            }
        }


class FunnelStage(BaseModel):
    """One bar of the funnel view."""

    stage: str
    count: int = 0
    value: float = 0.0
    conversion_rate: Optional[float] = Field(
        None, description="count / previous stage count * 100; None for the first stage"
    )


class PipelineMetrics(BaseModel):
    """Headline pipeline metrics and funnel."""

    total: int = 0
    active: int = 0
    won_count: int = 0
    lost_count: int = 0
    total_potential_value: float = 0.0
    won_value: float = 0.0
    win_rate: float = 0.0
    avg_alignment_score: float = 0.0
    urgent_deadlines: int = 0
    stage_counts: dict[str, int] = Field(default_factory=dict)
    funnel: list[FunnelStage] = Field(default_factory=list)
