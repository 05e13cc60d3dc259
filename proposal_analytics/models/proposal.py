"""Proposal section and compliance models.

RequiredSection and ComplianceChecklistItem come from the funder requirement
extraction; ProposalSection is the section record edited in the proposal
editor.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


ChecklistCategory = Literal["eligibility", "content", "format", "submission"]

CHECKLIST_CATEGORIES: tuple[str, ...] = ("eligibility", "content", "format", "submission")


class RequiredSection(BaseModel):
    """A section the funder requires in the proposal."""

    name: str = Field(..., description="Section name as written by the funder")
    word_limit: Optional[int] = Field(None, ge=0)
    page_limit: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ProposalSection(BaseModel):
    """A drafted section of the proposal."""

    id: str
    section_type: str = ""
    title: str
    content: str = Field(default="", description="Section body, possibly empty")
    word_count: int = Field(default=0, ge=0)
    word_limit: Optional[int] = Field(None, ge=0)
    is_complete: bool = False


class ComplianceChecklistItem(BaseModel):
    """A funder-imposed requirement from the compliance checklist."""

    item: str = Field(..., description="Requirement text")
    category: ChecklistCategory
    required: bool = True


class ScoredChecklistItem(ComplianceChecklistItem):
    """Checklist item with its freshly derived `addressed` flag."""

    addressed: bool


class CategoryTally(BaseModel):
    completed: int = 0
    total: int = 0


class ComplianceResult(BaseModel):
    """Compliance snapshot for a proposal."""

    scored_items: list[ScoredChecklistItem] = Field(default_factory=list)
    overall_percent: int = Field(..., ge=0, le=100)
    by_category: dict[str, CategoryTally] = Field(default_factory=dict)
    required_total: int = 0
    required_addressed: int = 0
    band: Literal["good", "fair", "low"] = "good"


class RequiredSectionStatus(BaseModel):
    """Match state of one required section."""

    name: str
    matched_section_id: Optional[str] = None
    addressed: bool = False
    word_count: int = 0
    word_limit: Optional[int] = None
    limit_status: Optional[Literal["ok", "near", "over"]] = None


class SectionCompletion(BaseModel):
    """Required-section coverage for a proposal."""

    sections: list[RequiredSectionStatus] = Field(default_factory=list)
    complete: int = 0
    total: int = 0
