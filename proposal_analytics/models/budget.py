"""Budget models - line items entered in the budget builder and their roll-up."""

from typing import Literal, Optional
from pydantic import BaseModel, Field, computed_field
from pydantic.alias_generators import to_camel


BudgetCategory = Literal[
    "personnel",
    "fringe",
    "travel",
    "equipment",
    "supplies",
    "contractual",
    "construction",
    "other",
    "indirect",
]

FundingSource = Literal["requested", "matching", "in_kind"]


class BudgetLineItem(BaseModel):
    """A single budget line item.

    `total` is always derived from quantity and unit cost. A `total` key in
    the incoming record (e.g. a value persisted before the last edit) is
    ignored.
    """

    id: Optional[str] = Field(None, description="Line item identifier")
    category: BudgetCategory = Field(..., description="Budget category enum value")
    description: str = Field(default="", description="Free-text description")
    quantity: float = Field(default=0, ge=0, description="Number of units")
    unit: str = Field(default="unit", description="Unit label: hour, month, trip, ...")
    unit_cost: float = Field(default=0, ge=0, description="Cost per unit")
    funding_source: FundingSource = Field(default="requested", description="Accounting bucket")
    justification: str = Field(default="", description="Budget justification text")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @computed_field
    @property
    def total(self) -> float:
        return self.quantity * self.unit_cost


class BudgetSummary(BaseModel):
    """Roll-up of a set of line items. Derived, never persisted."""

    total_requested: float = 0.0
    total_matching: float = 0.0
    total_in_kind: float = 0.0
    grand_total: float = 0.0
    by_category: dict[str, float] = Field(
        default_factory=dict, description="Category enum value -> summed total"
    )

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class CategoryShare(BaseModel):
    """One row of the 'Budget by Category' breakdown."""

    category: str
    label: str
    amount: float
    percent: float = Field(..., description="Share of grand total, 0-100")
