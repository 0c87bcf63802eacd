from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DATE_PATTERN


class ExpenseIn(BaseModel):
    """Typed creation payload.

    Only built from input that already passed ``validate_expense_payload``;
    the validators here guard direct construction in code and tests.
    """

    model_config = ConfigDict(frozen=True)

    amount: float
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    date: str = Field(..., pattern=DATE_PATTERN)

    @field_validator("description", "category", mode="before")
    @classmethod
    def strip_text(cls, v):  # type: ignore[override]
        if isinstance(v, str):
            return v.strip()
        return v


class Expense(ExpenseIn):
    id: str
