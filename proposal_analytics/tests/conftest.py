"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from proposal_analytics.models import (
    BudgetLineItem,
    ComplianceChecklistItem,
    ProposalSection,
    RequiredSection,
    TrackedOpportunity,
)


LONG_NARRATIVE = (
    "Our organization will deliver after-school tutoring to 400 students across "
    "three districts. Program evaluation will track attendance, reading levels and "
    "family engagement every quarter, with results shared with the funder."
)


@pytest.fixture
def as_of():
    return datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_line_items():
    """Line items as they arrive from the budget builder (camelCase keys)."""
    return [
        BudgetLineItem.model_validate({
            "id": "item-1",
            "category": "personnel",
            "description": "Program Director",
            "quantity": 12,
            "unit": "month",
            "unitCost": 5000,
            "fundingSource": "requested",
        }),
        BudgetLineItem.model_validate({
            "id": "item-2",
            "category": "fringe",
            "description": "Benefits at 25%",
            "quantity": 1,
            "unit": "lump sum",
            "unitCost": 15000,
            "fundingSource": "matching",
        }),
        BudgetLineItem.model_validate({
            "id": "item-3",
            "category": "supplies",
            "description": "Donated laptops",
            "quantity": 10,
            "unit": "each",
            "unitCost": 800,
            "fundingSource": "in_kind",
        }),
        BudgetLineItem.model_validate({
            "id": "item-4",
            "category": "personnel",
            "description": "Tutors",
            "quantity": 2000,
            "unit": "hour",
            "unitCost": 25,
            "fundingSource": "requested",
        }),
    ]


@pytest.fixture
def sample_sections():
    return [
        ProposalSection(
            id="sec-1",
            section_type="executive_summary",
            title="Executive Summary",
            content=LONG_NARRATIVE,
            word_count=38,
            word_limit=500,
        ),
        ProposalSection(
            id="sec-2",
            section_type="budget_narrative",
            title="Budget Narrative",
            content="TBD",
            word_count=1,
        ),
        ProposalSection(
            id="sec-3",
            section_type="evaluation_plan",
            title="Evaluation Plan (2 pages max)",
            content="",
        ),
    ]


@pytest.fixture
def sample_required_sections():
    return [
        RequiredSection.model_validate({"name": "Executive Summary", "wordLimit": 40}),
        RequiredSection(name="Budget Narrative"),
        RequiredSection(name="Evaluation Plan", page_limit=2),
        RequiredSection(name="Organizational Capacity"),
    ]


@pytest.fixture
def sample_checklist():
    return [
        ComplianceChecklistItem(item="Describe program evaluation methods", category="content"),
        ComplianceChecklistItem(item="Serve students in rural districts", category="eligibility"),
        ComplianceChecklistItem(item="Use 12pt font", category="format", required=False),
        ComplianceChecklistItem(item="Submit via online portal", category="submission"),
    ]


@pytest.fixture
def sample_opportunities():
    return [
        TrackedOpportunity(id="o1", title="Literacy Grant", status="new", award_amount_max=25000,
                           alignment_score=70, response_deadline=datetime(2026, 10, 5, tzinfo=timezone.utc)),
        TrackedOpportunity(id="o2", title="STEM Fund", status="reviewing", award_amount_min=10000,
                           alignment_score=90, response_deadline=datetime(2026, 10, 30, tzinfo=timezone.utc)),
        TrackedOpportunity(id="o3", title="Arts Access", status="pursuing", award_amount_max=40000),
        TrackedOpportunity(id="o4", title="Youth Sports", status="submitted", award_amount_max=15000),
        TrackedOpportunity(id="o5", title="Family Services", status="won", award_amount_max=60000),
        TrackedOpportunity(id="o6", title="Health Outreach", status="lost", award_amount_max=80000),
        TrackedOpportunity(id="o7", title="Old RFP", status="archived", award_amount_max=9_000_000),
    ]
